"""
Field type tests

Test classes:
    TestDefaults           — label-only construction seeds exactly the documented defaults
    TestLastWriteWins      — repeated setter calls keep the last value
    TestButton ... TestRepeater — per-type setters, validation and composite setters
"""

from __future__ import annotations

import pytest

from acf_fields import (
    AdvancedLink,
    Button,
    Checkbox,
    Clone,
    CodeEditor,
    Columns,
    Countries,
    DateRangePicker,
    File,
    FlexibleContent,
    FocusPoint,
    Gallery,
    Image,
    ImageMapping,
    ImageSelector,
    InvalidArgumentError,
    Layout,
    Location,
    OpenStreetMap,
    PostObject,
    Repeater,
    SVGIcon,
    Table,
)

CUSTOM_RANGES = ["Today", "Yesterday", "Last 7 Days", "Last 30 Days", "This Month", "Last Month"]

EXPECTED_DEFAULTS = [
    (AdvancedLink, "acfe_advanced_link", {}),
    (
        Button,
        "acfe_button",
        {"button_value": "Submit", "button_type": "button", "button_class": "button button-secondary"},
    ),
    (Checkbox, "checkbox", {}),
    (Clone, "clone", {"acfe_clone_modal_button": "Edit"}),
    (CodeEditor, "acfe_code_editor", {"mode": "text/html", "indent_unit": 4, "rows": 4}),
    (Columns, "acfe_column", {}),
    (Countries, "acfe_countries", {}),
    (DateRangePicker, "acfe_date_range_picker", {"custom_ranges": CUSTOM_RANGES}),
    (File, "file", {}),
    (FlexibleContent, "flexible_content", {"acfe_flexible_advanced": True}),
    (FocusPoint, "focuspoint", {}),
    (Gallery, "gallery", {}),
    (Image, "image", {"uploader": "default"}),
    (ImageMapping, "image_mapping", {}),
    (ImageSelector, "acfe_image_selector", {}),
    (Layout, "layout", {"acfe_flexible_modal_edit_size": ""}),
    (OpenStreetMap, "open_street_map", {}),
    (PostObject, "post_object", {}),
    (Repeater, "repeater", {}),
    (SVGIcon, "svg_icon", {}),
    (Table, "table", {}),
]


# ══════════════════════════════════════════════════════════════════════════════
# 1. Defaults and generic contract
# ══════════════════════════════════════════════════════════════════════════════


class TestDefaults:
    @pytest.mark.parametrize(("field_class", "field_type", "defaults"), EXPECTED_DEFAULTS)
    def test_label_only_construction(self, field_class, field_type, defaults):
        field = field_class("Label")
        assert field.type == field_type
        assert field.label == "Label"
        assert field.name is None
        assert field.settings == defaults

    def test_defaults_not_shared_between_instances(self):
        first = DateRangePicker("One")
        first.settings["custom_ranges"].append("Next Week")
        assert DateRangePicker("Two").settings["custom_ranges"] == CUSTOM_RANGES


class TestLastWriteWins:
    @pytest.mark.parametrize(
        ("field", "method", "key", "first", "second"),
        [
            (Button("B"), "button_type", "button_type", "button", "submit"),
            (CodeEditor("C"), "rows", "rows", 4, 10),
            (Clone("C"), "display", "display", "group", "seamless"),
            (Countries("C"), "appearance", "field_type", "select", "radio"),
            (DateRangePicker("D"), "min_range", "min_days", 1, 3),
            (ImageSelector("I"), "image_size", "image_size", "thumbnail", "large"),
            (OpenStreetMap("M"), "zoom", "zoom", 4, 12),
            (Layout("L"), "default_column", "acfe_layout_col", 6, 12),
        ],
    )
    def test_second_call_wins(self, field, method, key, first, second):
        getattr(field, method)(first)
        getattr(field, method)(second)
        assert field.settings[key] == second


# ══════════════════════════════════════════════════════════════════════════════
# 2. Button
# ══════════════════════════════════════════════════════════════════════════════


class TestButton:
    def test_end_to_end(self):
        field = Button("Send").button_type("submit").button_ajax()
        assert field.settings == {
            "button_value": "Submit",
            "button_type": "submit",
            "button_class": "button button-secondary",
            "button_ajax": True,
        }

    def test_html_and_attributes(self):
        field = Button("Send").button_before("<p>").button_after("</p>").button_id("send").button_class("primary")
        assert field.settings["button_before"] == "<p>"
        assert field.settings["button_after"] == "</p>"
        assert field.settings["button_id"] == "send"
        assert field.settings["button_class"] == "primary"

    def test_button_value(self):
        assert Button("Send").button_value("Go").settings["button_value"] == "Go"

    def test_button_type_is_unvalidated(self):
        assert Button("Send").button_type("reset").settings["button_type"] == "reset"


# ══════════════════════════════════════════════════════════════════════════════
# 3. Countries
# ══════════════════════════════════════════════════════════════════════════════


class TestCountries:
    def test_end_to_end(self):
        field = Countries("Region").appearance("select").return_format("code")
        assert field.settings == {"field_type": "select", "return_format": "code"}

    def test_invalid_appearance(self):
        field = Countries("Region")
        with pytest.raises(InvalidArgumentError) as exc_info:
            field.appearance("invalid")
        assert exc_info.value.value == "invalid"
        assert str(exc_info.value) == "Invalid argument field type [invalid]."
        assert field.settings == {}

    def test_invalid_appearance_keeps_previous_value(self):
        field = Countries("Region").appearance("radio")
        with pytest.raises(InvalidArgumentError):
            field.appearance("dropdown")
        assert field.settings == {"field_type": "radio"}

    @pytest.mark.parametrize("value", ["checkbox", "multi_select", "select", "radio"])
    def test_valid_appearances(self, value):
        assert Countries("Region").appearance(value).settings == {"field_type": value}

    @pytest.mark.parametrize("value", ["array", "name", "code"])
    def test_valid_return_formats(self, value):
        assert Countries("Region").return_format(value).settings == {"return_format": value}

    def test_invalid_return_format(self):
        field = Countries("Region")
        with pytest.raises(InvalidArgumentError) as exc_info:
            field.return_format("id")
        assert exc_info.value.allowed == ("array", "name", "code")
        assert field.settings == {}

    def test_countries_list(self):
        assert Countries("Region").countries(["de", "fr"]).settings == {"countries": ["de", "fr"]}

    def test_flags_and_continents(self):
        field = Countries("Region").flags().continents().display_format("{localized}")
        assert field.settings == {"flags": True, "continents": True, "display_format": "{localized}"}

    def test_stylised_ui(self):
        assert Countries("Region").stylised_ui().settings == {"ui": True, "ajax": False}
        assert Countries("Region").stylised_ui(True).settings == {"ui": True, "ajax": True}

    def test_mixins(self):
        field = Countries("Region").min_items(1).max_items(3).nullable().multiple()
        assert field.settings == {"min": 1, "max": 3, "allow_null": True, "multiple": True}


# ══════════════════════════════════════════════════════════════════════════════
# 4. Clone
# ══════════════════════════════════════════════════════════════════════════════


class TestClone:
    def test_fields(self):
        assert Clone("Hero").fields(["group_hero"]).settings["clone"] == ["group_hero"]

    def test_prefixes_and_seamless(self):
        field = Clone("Hero").prefix_label().prefix_name().seamless()
        assert field.settings["prefix_label"] is True
        assert field.settings["prefix_name"] is True
        assert field.settings["acfe_seamless_style"] is True

    def test_modal_forces_group_display(self):
        field = Clone("Hero").display("seamless").modal()
        assert field.settings["display"] == "group"
        assert field.settings["acfe_clone_modal"] is True

    def test_modal_equals_constituents(self):
        composite = Clone("Hero").modal()

        manual = Clone("Hero").display("group")
        manual.settings["acfe_clone_modal"] = True

        assert composite.settings == manual.settings

    def test_modal_close_equals_modal_then_flag(self):
        composite = Clone("Hero").modal_close()

        manual = Clone("Hero").modal()
        manual.settings["acfe_clone_modal_close"] = True

        assert composite.settings == manual.settings
        assert composite.settings == {
            "acfe_clone_modal_button": "Edit",
            "display": "group",
            "acfe_clone_modal": True,
            "acfe_clone_modal_close": True,
        }

    def test_modal_button_and_size(self):
        field = Clone("Hero").modal_button("Open").modal_size("xlarge")
        assert field.settings["acfe_clone_modal_button"] == "Open"
        assert field.settings["acfe_clone_modal_size"] == "xlarge"

    def test_sub_field_layout(self):
        assert Clone("Hero").layout("table").settings["layout"] == "table"


# ══════════════════════════════════════════════════════════════════════════════
# 5. Code editor / Columns / Advanced link
# ══════════════════════════════════════════════════════════════════════════════


class TestCodeEditor:
    def test_setters(self):
        field = CodeEditor("Snippet").mode("css").lines().indent_unit(2).max_length(500).max_rows(20)
        field.return_entities()
        assert field.settings == {
            "mode": "css",
            "indent_unit": 2,
            "rows": 4,
            "lines": True,
            "maxlength": 500,
            "max_rows": 20,
            "return_entities": True,
        }

    def test_default_and_placeholder(self):
        field = CodeEditor("Snippet").default("<div></div>").placeholder("HTML here")
        assert field.settings["default_value"] == "<div></div>"
        assert field.settings["placeholder"] == "HTML here"


class TestColumns:
    def test_columns(self):
        field = Columns("Left").columns("6/12").border(["column", "fields"])
        assert field.settings == {"columns": "6/12", "border": ["column", "fields"]}

    def test_endpoint(self):
        assert Columns("End").endpoint().settings == {"endpoint": True}

    def test_columns_is_unvalidated(self):
        assert Columns("Left").columns("13/12").settings == {"columns": "13/12"}


class TestAdvancedLink:
    def test_filters(self):
        field = AdvancedLink("Link").post_type(["page", "post"]).taxonomy(["category"])
        assert field.settings == {"post_type": ["page", "post"], "taxonomy": ["category"]}


# ══════════════════════════════════════════════════════════════════════════════
# 6. Date range picker
# ══════════════════════════════════════════════════════════════════════════════


class TestDateRangePicker:
    def test_range_settings(self):
        field = (
            DateRangePicker("Period")
            .separator(" to ")
            .default_start("today")
            .default_end("+7 days")
            .min_range(1)
            .max_range(30)
            .min_date("-1 year")
            .max_date("+1 year")
        )
        assert field.settings["separator"] == " to "
        assert field.settings["default_start"] == "today"
        assert field.settings["default_end"] == "+7 days"
        assert field.settings["min_days"] == 1
        assert field.settings["max_days"] == 30
        assert field.settings["min_date"] == "-1 year"
        assert field.settings["max_date"] == "+1 year"

    def test_custom_ranges_override(self):
        assert DateRangePicker("Period").custom_ranges(["Today"]).settings["custom_ranges"] == ["Today"]

    def test_custom_ranges_without_argument_clears(self):
        assert DateRangePicker("Period").custom_ranges().settings["custom_ranges"] == []

    def test_flags(self):
        field = DateRangePicker("Period").dropdowns().no_weekends().auto_close()
        assert field.settings["show_dropdowns"] is True
        assert field.settings["no_weekends"] is True
        assert field.settings["auto_close"] is True


# ══════════════════════════════════════════════════════════════════════════════
# 7. Flexible content and layouts
# ══════════════════════════════════════════════════════════════════════════════


class TestFlexibleContent:
    def test_modal_edit_default_size(self):
        field = FlexibleContent("Blocks").modal_edit()
        assert field.settings["acfe_flexible_modal_edit"] == {
            "acfe_flexible_modal_edit_enabled": True,
            "acfe_flexible_modal_edit_size": "full",
        }

    def test_modal_edit_size_is_unvalidated(self):
        field = FlexibleContent("Blocks").modal_edit("huge")
        assert field.settings["acfe_flexible_modal_edit"]["acfe_flexible_modal_edit_size"] == "huge"

    def test_modal_selection(self):
        field = FlexibleContent("Blocks").modal_selection("large", "Pick one", 3, True)
        assert field.settings["acfe_flexible_modal"] == {
            "acfe_flexible_modal_enabled": True,
            "acfe_flexible_modal_title": "Pick one",
            "acfe_flexible_modal_size": "large",
            "acfe_flexible_modal_col": 3,
            "acfe_flexible_modal_categories": True,
        }

    def test_modal_selection_defaults(self):
        settings = FlexibleContent("Blocks").modal_selection().settings["acfe_flexible_modal"]
        assert settings["acfe_flexible_modal_title"] == "Choose Layout"
        assert settings["acfe_flexible_modal_size"] == "full"
        assert settings["acfe_flexible_modal_col"] == 4
        assert settings["acfe_flexible_modal_categories"] is False

    def test_grid(self):
        field = FlexibleContent("Blocks").grid()
        assert field.settings["acfe_flexible_grid"] == {
            "acfe_flexible_grid_enabled": True,
            "acfe_flexible_grid_align": "center",
            "acfe_flexible_grid_valign": "stretch",
            "acfe_flexible_grid_wrap": 0,
        }

    @pytest.mark.parametrize(
        ("method", "key"),
        [
            ("stylised_button", "acfe_flexible_stylised_button"),
            ("templates", "acfe_flexible_layouts_templates"),
            ("placeholder", "acfe_flexible_layouts_placeholder"),
            ("previews", "acfe_flexible_layouts_previews"),
            ("thumbnails", "acfe_flexible_layouts_thumbnails"),
            ("layout_settings", "acfe_flexible_layouts_settings"),
            ("ajax", "acfe_flexible_layouts_ajax"),
            ("has_locations", "acfe_flexible_layouts_locations"),
        ],
    )
    def test_flags(self, method, key):
        field = getattr(FlexibleContent("Blocks"), method)()
        assert field.settings == {"acfe_flexible_advanced": True, key: True}

    def test_actions_and_empty_message(self):
        field = FlexibleContent("Blocks").add_actions(["title", "copy"]).empty_message("Nothing yet")
        assert field.settings["acfe_flexible_add_actions"] == ["title", "copy"]
        assert field.settings["acfe_flexible_empty_message"] == "Nothing yet"

    def test_layouts_stored(self):
        hero = Layout("Hero")
        assert FlexibleContent("Blocks").layouts([hero]).settings["layouts"] == [hero]


class TestLayout:
    def test_modal_size(self):
        assert Layout("Hero").modal_size("large").settings == {"acfe_flexible_modal_edit_size": "large"}

    def test_settings_clone(self):
        field = Layout("Hero").settings_clone(["group_settings"], "medium")
        assert field.settings["acfe_flexible_settings"] == ["group_settings"]
        assert field.settings["acfe_flexible_settings_size"] == "medium"

    def test_category(self):
        assert Layout("Hero").category(["Header"]).settings["acfe_flexible_category"] == ["Header"]
        assert Layout("Hero").category().settings["acfe_flexible_category"] == []

    def test_columns(self):
        field = Layout("Hero").default_column().allowed_columns([0, 6, 12])
        assert field.settings["acfe_layout_col"] == 12
        assert field.settings["acfe_layout_allowed_col"] == [0, 6, 12]

    def test_locations_resolved_on_write(self):
        rule = Location.where("post_type", "==", "page").and_("page_template", "!=", "landing.php")
        field = Layout("Hero").locations([rule])
        assert field.settings["acfe_layout_locations"] == [
            [
                {"param": "post_type", "operator": "==", "value": "page"},
                {"param": "page_template", "operator": "!=", "value": "landing.php"},
            ]
        ]

    def test_render_fills_missing_files(self):
        field = Layout("Hero").render({"template": "hero.php"})
        assert field.settings["acfe_flexible_render_template"] == "hero.php"
        assert field.settings["acfe_flexible_render_style"] == ""
        assert field.settings["acfe_flexible_render_script"] == ""


# ══════════════════════════════════════════════════════════════════════════════
# 8. Media fields
# ══════════════════════════════════════════════════════════════════════════════


class TestImage:
    def test_uploader(self):
        assert Image("Photo").uploader("basic").settings == {"uploader": "basic"}

    def test_media_settings(self):
        field = Image("Photo").return_format("url").preview_size("medium").mime_types(["jpg"])
        assert field.settings["return_format"] == "url"
        assert field.settings["preview_size"] == "medium"
        assert field.settings["mime_types"] == "jpg"


class TestGallery:
    def test_prepend_files(self):
        assert Gallery("Photos").prepend_files().settings == {"insert": "prepend"}


class TestFocusPoint:
    def test_media_settings(self):
        field = FocusPoint("Hero image").library("uploadedTo").preview_size("large").nullable()
        assert field.settings == {"library": "uploadedTo", "preview_size": "large", "allow_null": True}


class TestImageMapping:
    def test_setters(self):
        field = ImageMapping("Hotspot").image_field("Floor plan").default_image("plan.png").percent_based()
        assert field.settings == {
            "image_field_label": "Floor plan",
            "default_image": "plan.png",
            "percent_based": True,
        }


class TestImageSelector:
    def test_container_defaults(self):
        assert ImageSelector("Style").container().settings == {"width": "", "height": "", "border": 4}

    def test_container_values(self):
        field = ImageSelector("Style").container("120px", "80px", 2)
        assert field.settings == {"width": "120px", "height": "80px", "border": 2}

    def test_image_size(self):
        assert ImageSelector("Style").image_size("thumbnail").settings == {"image_size": "thumbnail"}


# ══════════════════════════════════════════════════════════════════════════════
# 9. Map / relational / repeater
# ══════════════════════════════════════════════════════════════════════════════


class TestOpenStreetMap:
    def test_map_settings(self):
        field = OpenStreetMap("Location").height("400").center_map(52.52, 13.405).zoom(12).max_markers(3)
        assert field.settings == {
            "height": "400",
            "center_lat": 52.52,
            "center_lng": 13.405,
            "zoom": 12,
            "max_markers": 3,
        }

    def test_allow_map_layers_writes_false(self):
        assert OpenStreetMap("Location").allow_map_layers().settings == {"allow_map_layers": False}

    def test_return_format_is_unvalidated(self):
        assert OpenStreetMap("Location").return_format("leaflet").settings == {"return_format": "leaflet"}

    def test_layers_default(self):
        assert OpenStreetMap("Location").layers().settings == {"layers": ["Stadia.OSMBright"]}

    def test_layers_custom(self):
        assert OpenStreetMap("Location").layers(["OpenTopoMap"]).settings == {"layers": ["OpenTopoMap"]}


class TestPostObject:
    def test_filters(self):
        field = PostObject("Related").post_types(["post"]).post_status(["publish"]).taxonomies(["category:news"])
        assert field.settings == {
            "post_type": ["post"],
            "post_status": ["publish"],
            "taxonomy": ["category:news"],
        }


class TestRepeater:
    def test_collapsed_and_pagination(self):
        field = Repeater("Slides").collapsed("title").paginated(10)
        assert field.settings == {"collapsed": "title", "pagination": True, "rows_per_page": 10}
