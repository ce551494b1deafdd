VERSION = "0.1.0"

PRODUCT_ID = f"-//vcardx//NONSGML vcardx {VERSION}//EN"

DEFAULT_CHARSET = "utf-8"

XML_NAMESPACE = "urn:ietf:params:xml:ns:vcard-4.0"


class Character:
    """Space and Line-break characters"""

    CR = "\r"
    LF = "\n"
    CRLF = CR + LF
    SPACE = " "
    TAB = "\t"
    SPACEORTAB = SPACE + TAB
