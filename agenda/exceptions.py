"""Exceptions raised by the terminal layer."""


class AgendaError(Exception):
    """Base class for errors raised by the scheduling terminal."""


class FieldEntryAborted(AgendaError):
    """
    Input ended before a field value was accepted.

    Distinct from a rejected value, which is handled by re-prompting.
    """

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Input ended while reading field '{label}'")
