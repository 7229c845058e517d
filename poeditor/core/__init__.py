"""Client, handles and request pipeline of the POEditor client.

This package contains the `POEditor` client, the `Project` and `Language` handles, the request
dispatcher and the response envelope codec.
"""

from poeditor.core.client import POEditor
from poeditor.core.dispatcher import Identity, RequestDispatcher, merge_identity
from poeditor.core.envelope import classify_response, decode_envelope, decode_result
from poeditor.core.language import Language
from poeditor.core.project import Project
from poeditor.core.version import VERSION

__all__: list[str] = [
    "VERSION",
    "Identity",
    "Language",
    "POEditor",
    "Project",
    "RequestDispatcher",
    "classify_response",
    "decode_envelope",
    "decode_result",
    "merge_identity",
]
