"""Standard field name mappings for auto-detection.

Maps common contact column names to renderer types, regardless of value.
"""

import re
from typing import Dict, Optional

from fieldrender.models.renderers import RendererType

_SEPARATORS_RE = re.compile(r"[_\s-]")

STANDARD_FIELD_MAPPINGS: Dict[str, RendererType] = {
    # URL fields
    "website": RendererType.URL,
    "url": RendererType.URL,
    "link": RendererType.URL,
    "homepage": RendererType.URL,
    # Email fields
    "email": RendererType.EMAIL,
    "mail": RendererType.EMAIL,
    "emailaddress": RendererType.EMAIL,
    # Phone fields
    "phone": RendererType.PHONE,
    "telephone": RendererType.PHONE,
    "tel": RendererType.PHONE,
    "mobile": RendererType.PHONE,
    "cell": RendererType.PHONE,
    "fax": RendererType.PHONE,
}


def normalize_standard_field_name(field_name: str) -> str:
    """Lowercase a field name and strip underscores, whitespace and hyphens."""
    return _SEPARATORS_RE.sub("", field_name.strip().lower())


def get_standard_field_renderer(field_name: str) -> Optional[RendererType]:
    """Get the built-in renderer type for a standard contact field name.

    Exact lookup only: "Email_Address" maps to email, "contact_phone" does not
    map at all.

    Args:
        field_name: Column name as it appears in the sheet

    Returns:
        RendererType or None if the name is not a standard field
    """
    return STANDARD_FIELD_MAPPINGS.get(normalize_standard_field_name(field_name))
