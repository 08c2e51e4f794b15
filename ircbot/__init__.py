"""IRC hook-dispatch client.

Subpackages:
  irc      - parser, dispatcher, read loop, transport and error channel
  modules  - pluggable module contract, module set and bundled modules
  config   - pydantic configuration model and JSON loader
  errors   - internal error hierarchy and structured error logging
  logs     - event logger and template catalog
"""

__version__ = "0.1.0"
