"""Conference site content backend.

Serves the editable content document of the conference landing page
(program, speakers, pricing, notifications, contacts) over a small JSON
API and ships the editing client used by the inline admin mode.
"""

__all__ = [
]
