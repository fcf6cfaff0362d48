"""Style lock handling for a studio session."""

from dataclasses import replace

from render_studio.domain.rendering import ResultRecord
from render_studio.domain.sessions import StudioSession


def lock_style(session: StudioSession, record: ResultRecord) -> ResultRecord:
    """Lock a record as the style reference, capturing the current prompt."""
    locked = replace(record, prompt_text=session.prompt)
    session.style_lock = locked
    session.apply_selection(record.selection)
    return locked


def unlock_style(session: StudioSession) -> None:
    """Clear the style lock."""
    session.style_lock = None


def toggle_style_lock(
    session: StudioSession, record: ResultRecord
) -> ResultRecord | None:
    """Unlock when the record is already locked, otherwise lock it."""
    if session.style_lock is not None and session.style_lock.id == record.id:
        unlock_style(session)
        return None
    return lock_style(session, record)
