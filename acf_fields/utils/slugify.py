import re
from unidecode import unidecode

def slugify(text, separator="_"):
    text = unidecode(text).lower()
    text = re.sub(r'[^a-z0-9]+', separator, text).strip(separator)
    return text
