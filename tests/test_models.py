"""
Unit Tests — Models
===================
Derived last-change accessor and the linear lookups on Document.
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.models.bug import Bug
from app.models.change import Change
from app.models.document import Document
from app.models.part import Part


def _change(status, who="alice"):
    return Change(when=datetime(2024, 1, 1, tzinfo=timezone.utc), who=who, status=status)


def _document():
    return Document(
        next_id=4,
        parts=[
            Part(id=1, name="core", bugs=[Bug(id=0, subject="a"), Bug(id=3, subject="d")]),
            Part(id=2, name="ui", bugs=[Bug(id=1, subject="b")]),
            Part(id=5, name="docs"),
        ],
    )


# ---------------------------------------------------------------------------
# 1. Bug.last
# ---------------------------------------------------------------------------
class TestBugLast:

    def test_no_changes_means_no_last(self):
        assert Bug(id=0).last is None

    def test_last_is_tail_of_changes(self):
        bug = Bug(id=0, changes=[_change(1), _change(2)])
        assert bug.last is bug.changes[-1]
        assert bug.last.status == 2

    def test_last_follows_append(self):
        bug = Bug(id=0, changes=[_change(1)])
        bug.changes.append(_change(3, who="bob"))
        assert bug.last.status == 3
        assert bug.last.who == "bob"

    def test_last_is_not_serialized(self):
        bug = Bug(id=0, changes=[_change(1)])
        assert "last" not in bug.model_dump()

    def test_change_is_immutable(self):
        change = _change(1)
        with pytest.raises(ValidationError):
            change.status = 2


# ---------------------------------------------------------------------------
# 2. Lookups
# ---------------------------------------------------------------------------
class TestDocumentLookups:

    def test_find_bug_in_any_part(self):
        doc = _document()
        assert doc.find_bug(0).subject == "a"
        assert doc.find_bug(1).subject == "b"
        assert doc.find_bug(3).subject == "d"

    def test_find_bug_missing(self):
        assert _document().find_bug(99) is None

    def test_find_bug_returns_live_reference(self):
        doc = _document()
        doc.find_bug(1).subject = "changed"
        assert doc.parts[1].bugs[0].subject == "changed"

    def test_find_part(self):
        doc = _document()
        assert doc.find_part(5).name == "docs"
        assert doc.find_part(3) is None

    def test_find_part_returns_live_reference(self):
        doc = _document()
        doc.find_part(5).bugs.append(Bug(id=4))
        assert doc.parts[2].bugs[0].id == 4

    def test_bug_count_and_iteration(self):
        doc = _document()
        assert doc.bug_count() == 3
        assert [b.id for b in doc.iter_bugs()] == [0, 3, 1]

    def test_empty_document_defaults(self):
        doc = Document()
        assert doc.next_id == 0
        assert doc.users == []
        assert doc.parts == []
        assert doc.find_bug(0) is None
