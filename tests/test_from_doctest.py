import vcardx

from .common import get_test_file


def test_vcardx():
    """Converted from doctest of vcardx/__init__.py"""
    card = vcardx.read_one("BEGIN:VCARD\r\nVERSION:3.0\r\nFN:Jeffrey Harris\r\nEND:VCARD\r\n")
    assert card.fn.value == "Jeffrey Harris"
    assert vcardx.write(card, version=vcardx.VCardVersion.V4_0, add_prodid=False).splitlines() == [
        "BEGIN:VCARD",
        "VERSION:4.0",
        "FN:Jeffrey Harris",
        "END:VCARD",
    ]


def test_repr():
    card = vcardx.read_one(get_test_file("vcard30.vcf"))
    assert repr(card.fn) == "<FN{}Forrest Gump>"
    assert repr(card.tel) == "<TEL{'TYPE': ['WORK', 'VOICE']}(111) 555-1212>"
    assert str(card.n) == "Mr. Forrest Gump"
    assert str(card.adr) == "100 Waters Edge\nBaytown, LA 30314\nUnited States of America"
    assert repr(card).startswith("<VCARD| [<N{}")
