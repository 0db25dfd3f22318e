"""Lookup between workflow status ids and their names."""

from opencloset.models.status import STATUS_LABELS, Status

_BY_LABEL = {label: int(status) for status, label in STATUS_LABELS.items()}


def get_status(id_or_name: int | str | None) -> int | str | None:
    """Translate a status id to its Korean name and back.

    English member names are accepted as aliases::

        get_status("repair")  # 6
        get_status("수선")     # 6
        get_status(6)         # "수선"
    """
    if id_or_name is None or id_or_name == "":
        return None

    text = str(id_or_name).strip()
    if text in _BY_LABEL:
        return _BY_LABEL[text]

    if text.isdigit():
        try:
            return Status(int(text)).label
        except ValueError:
            return None

    alias = text.upper().replace(" ", "_")
    if alias in Status.__members__:
        return int(Status[alias])
    return None
