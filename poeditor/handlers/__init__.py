"""Transport handlers for the POEditor client.

This package provides the asynchronous HTTP transport used to talk to the POEditor API.
"""

from poeditor.handlers.async_comm import AsyncHttp, BinarySink

__all__: list[str] = ["AsyncHttp", "BinarySink"]
