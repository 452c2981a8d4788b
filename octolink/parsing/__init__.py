"""
This package contains all modules related to decoding payloads received
from an OctoPrint server.

- ``split``: Separation of a reserved key from a dynamically-keyed object.
- ``temperature``: Temperature snapshot and history decoding.
- ``responses``: Whole response bodies into response records.
"""
from octolink.parsing.responses import decode_response
from octolink.parsing.split import split_reserved
from octolink.parsing.temperature import decode_historic_entry, decode_temperature

__all__ = ["decode_response", "split_reserved", "decode_historic_entry", "decode_temperature"]
