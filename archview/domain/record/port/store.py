from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from archview.domain.record.model import Accession, DigitalObject, Subject
from archview.domain.shared.port import Port


class RecordStore(Port, Protocol):
    """Read access to a collection of exported records.

    Implementations re-read their backing storage on every call.
    """

    @abstractmethod
    def subjects_by_uri(self) -> dict[str, Subject]:
        """All subjects keyed by URI."""
        ...

    @abstractmethod
    def digital_objects_by_uri(self) -> dict[str, DigitalObject]:
        """All digital objects keyed by URI."""
        ...

    @abstractmethod
    def accession(self, path: Path) -> Accession:
        """Load one accession record from its file."""
        ...
