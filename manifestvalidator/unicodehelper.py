import codecs


# Many thanks to nmaier for inspiration and code in this module

UNICODES = [
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
]


def decode(data):
    """
    Decode data employing some charset detection and including unicode BOM
    stripping.
    """

    if isinstance(data, str):
        return data

    # Detect standard unicodes. UTF-32 goes first since its little endian
    # BOM starts with the UTF-16 one.
    for bom, encoding in UNICODES:
        if data.startswith(bom):
            return data[len(bom):].decode(encoding, "ignore")

    # Try straight UTF-8, then fall back to latin-1, which maps every byte.
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin_1")
