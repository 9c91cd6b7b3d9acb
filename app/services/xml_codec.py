"""
XML Codec
=========
Converts a Document to and from the bugs.xml text format.

Layout:
    <db>
        <nextId/>
        <user><name/><address/></user>*
        <part><name/><id/>
            <bug><id/><subject/>
                <change><when/><who/><status/><comment/></change>*
            </bug>*
        </part>*
    </db>

Decoding is lenient about missing children (they take zero values) but strict
about content: a numeric element that is not an integer, or a timestamp that
is not RFC 3339, raises ValueError.
"""
import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Optional

from app.models.bug import Bug
from app.models.change import Change
from app.models.document import Document
from app.models.part import Part
from app.models.user import User

ROOT_TAG = "db"

# RFC 3339 fractions run from 1 to 9 digits; fromisoformat wants exactly 6.
_FRACTION_RE = re.compile(r"\.(\d+)")

# Zero value for a change with no <when>, same as an unset Go time.Time.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------
def _text(elem: ET.Element, tag: str) -> str:
    child = elem.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def _int(elem: ET.Element, tag: str) -> int:
    raw = _text(elem, tag).strip()
    if not raw:
        return 0
    return int(raw)


def parse_timestamp(raw: str) -> datetime:
    """Parse an RFC 3339 timestamp, including ``Z`` and 1-9 digit fractions.

    An empty value is the zero time.
    """
    value = raw.strip()
    if not value:
        return ZERO_TIME
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    value = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    return datetime.fromisoformat(value)


def _change_from_xml(elem: ET.Element) -> Change:
    return Change(
        when=parse_timestamp(_text(elem, "when")),
        who=_text(elem, "who"),
        status=_int(elem, "status"),
        comment=_text(elem, "comment"),
    )


def _bug_from_xml(elem: ET.Element) -> Bug:
    return Bug(
        id=_int(elem, "id"),
        subject=_text(elem, "subject"),
        changes=[_change_from_xml(c) for c in elem.findall("change")],
    )


def _part_from_xml(elem: ET.Element) -> Part:
    return Part(
        name=_text(elem, "name"),
        id=_int(elem, "id"),
        bugs=[_bug_from_xml(b) for b in elem.findall("bug")],
    )


def document_from_xml(data: bytes) -> Document:
    """
    Decode the bytes of a bugs.xml file.

    Raises
    ------
    xml.etree.ElementTree.ParseError
        The input is not well-formed XML.
    ValueError
        The root is not <db>, or a number/timestamp is malformed.
    """
    root = ET.fromstring(data)
    if root.tag != ROOT_TAG:
        raise ValueError(f"expected <{ROOT_TAG}> root element, found <{root.tag}>")
    return Document(
        next_id=_int(root, "nextId"),
        users=[
            User(name=_text(u, "name"), address=_text(u, "address"))
            for u in root.findall("user")
        ],
        parts=[_part_from_xml(p) for p in root.findall("part")],
    )


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------
def _sub(parent: ET.Element, tag: str, text: Optional[object] = None) -> ET.Element:
    child = ET.SubElement(parent, tag)
    if text is not None:
        child.text = str(text)
    return child


def _change_to_xml(parent: ET.Element, change: Change) -> None:
    elem = _sub(parent, "change")
    _sub(elem, "when", change.when.isoformat())
    _sub(elem, "who", change.who)
    _sub(elem, "status", change.status)
    _sub(elem, "comment", change.comment)


def _bug_to_xml(parent: ET.Element, bug: Bug) -> None:
    elem = _sub(parent, "bug")
    _sub(elem, "id", bug.id)
    _sub(elem, "subject", bug.subject)
    for change in bug.changes:
        _change_to_xml(elem, change)


def document_to_element(doc: Document) -> ET.Element:
    root = ET.Element(ROOT_TAG)
    _sub(root, "nextId", doc.next_id)
    for user in doc.users:
        elem = _sub(root, "user")
        _sub(elem, "name", user.name)
        _sub(elem, "address", user.address)
    for part in doc.parts:
        elem = _sub(root, "part")
        _sub(elem, "name", part.name)
        _sub(elem, "id", part.id)
        for bug in part.bugs:
            _bug_to_xml(elem, bug)
    return root


def document_to_xml(doc: Document) -> bytes:
    """Encode a Document as tab-indented UTF-8 XML with a declaration header."""
    root = document_to_element(doc)
    ET.indent(root, space="\t")
    return ET.tostring(root, encoding="UTF-8", xml_declaration=True) + b"\n"
