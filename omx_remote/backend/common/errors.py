from __future__ import annotations



class OmxRemoteError(Exception):
    """Base for all omx-remote exceptions."""
