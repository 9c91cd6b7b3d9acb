"""
Document Store
==============
Owns the single in-memory Document and its file on disk.

Persistence model:
    - load() reads the whole file once at startup.
    - Every mutation rewrites the whole file before returning.
    - save() writes <dir>/bugs.tmp, copies the current bugs.xml to
      bugs.xml.old, then os.replace()s the temp file onto bugs.xml.
      The canonical file is never missing; the backup holds the previous
      generation.

Locking:
    ``lock`` is one re-entrant mutex for the whole document. Callers hold it
    across lookup, mutation and save so concurrent writers are serialized.
    The mutating methods here take it too, so calling them bare is safe.
    HTTP handlers run their locked section in the threadpool, so a blocked
    writer waits on a worker thread and never stalls the event loop.

Failures are not caught: a load failure aborts startup, a save failure
aborts the request that triggered it.
"""
import logging
import os
import shutil
import threading
from datetime import datetime
from typing import Optional

from app.core.constants import BACKUP_SUFFIX, TEMP_FILE
from app.models.bug import Bug
from app.models.change import Change
from app.models.document import Document
from app.models.part import Part
from app.services.xml_codec import document_from_xml, document_to_xml

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Usage:
        store = DocumentStore("bugs.xml")
        store.load()
        with store.lock:
            bug = store.find_bug(3)
            if bug is not None:
                store.append_change(bug, "New subject", 1, "alice", "Looking")
    """

    def __init__(
        self,
        path: str,
        backup_suffix: str = BACKUP_SUFFIX,
        temp_name: str = TEMP_FILE,
    ) -> None:
        self.path = os.path.abspath(path)
        self.backup_path = self.path + backup_suffix
        self.temp_path = os.path.join(os.path.dirname(self.path), temp_name)
        self.document = Document()
        self.lock = threading.RLock()

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------
    def load(self) -> Document:
        """
        Replace the in-memory document with the contents of ``path``.

        Raises OSError when the file cannot be read, and ParseError or
        ValueError when it cannot be decoded.
        """
        with open(self.path, "rb") as f:
            data = f.read()
        document = document_from_xml(data)
        with self.lock:
            self.document = document
        logger.info(
            "Loaded %s: %d user(s), %d part(s), %d bug(s), next id %d",
            self.path,
            len(document.users),
            len(document.parts),
            document.bug_count(),
            document.next_id,
        )
        return document

    def save(self) -> None:
        """Serialize the whole document and swap it into place."""
        with self.lock:
            data = document_to_xml(self.document)
            with open(self.temp_path, "wb") as f:
                f.write(data)
            if os.path.exists(self.path):
                if os.path.exists(self.backup_path):
                    os.remove(self.backup_path)
                shutil.copy2(self.path, self.backup_path)
            os.replace(self.temp_path, self.path)
        logger.debug("Saved %d bytes to %s", len(data), self.path)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def find_bug(self, bug_id: int) -> Optional[Bug]:
        return self.document.find_bug(bug_id)

    def find_part(self, part_id: int) -> Optional[Part]:
        return self.document.find_part(part_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_bug(self, part: Part, subject: str) -> Bug:
        """Append a new bug with the next id to ``part`` and persist."""
        with self.lock:
            bug = Bug(id=self.document.next_id, subject=subject)
            self.document.next_id += 1
            part.bugs.append(bug)
            self.save()
        logger.info("Created bug %d in part %d (%s)", bug.id, part.id, part.name)
        return bug

    def append_change(
        self,
        bug: Bug,
        subject: str,
        status: int,
        who: str,
        comment: str,
        when: Optional[datetime] = None,
    ) -> Change:
        """Record a change on ``bug``, overwrite its subject, and persist."""
        if when is None:
            when = datetime.now().astimezone()
        change = Change(when=when, who=who, status=status, comment=comment)
        with self.lock:
            bug.subject = subject
            bug.changes.append(change)
            self.save()
        logger.info("Bug %d changed by %r: status=%d", bug.id, who, status)
        return change
