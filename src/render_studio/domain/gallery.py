"""In-memory gallery of saved render results."""

from dataclasses import dataclass, field

from render_studio.domain.rendering import ResultRecord
from render_studio.errors import NotFoundError


@dataclass
class Gallery:
    """Saved results, newest first, unique by identifier."""

    records: list[ResultRecord] = field(default_factory=list)

    def save(self, record: ResultRecord) -> bool:
        """Insert a record at the front unless its id is already saved."""
        if self.contains(record.id):
            return False
        self.records.insert(0, record)
        return True

    def delete(self, record_id: str) -> bool:
        """Remove a record by id; absent ids are ignored."""
        remaining = [record for record in self.records if record.id != record_id]
        removed = len(remaining) != len(self.records)
        self.records = remaining
        return removed

    def select(self, record_id: str) -> ResultRecord:
        """Return the saved record with the given id."""
        for record in self.records:
            if record.id == record_id:
                return record
        raise NotFoundError(f"Gallery record {record_id} not found")

    def contains(self, record_id: str) -> bool:
        """Return whether a record id is saved."""
        return any(record.id == record_id for record in self.records)

    def __len__(self) -> int:
        return len(self.records)
