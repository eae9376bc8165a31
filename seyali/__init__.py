"""Seyali.

A minimal full-stack starter made of two processes:

- ``seyali.server``: the Status Service, a FastAPI app answering
  ``/health``, ``/api/hello`` and ``/api/status``.
- ``seyali.page``: the Status Page, a server-rendered page that queries the
  three endpoints concurrently and renders whatever subset answered.

Shared logging and Logfire monitoring helpers live in ``seyali.core``.
"""

__version__ = "1.0.0"
