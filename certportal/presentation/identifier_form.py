"""
Identifier entry checks for the search form.

Dependencies: certportal.core.identifier
System role: User-facing validation before navigating to a listing
"""

from certportal.core.identifier import MIN_IDENTIFIER_LENGTH, is_valid_identifier


def normalize_identifier_input(raw: str | None) -> str:
    """Strip surrounding whitespace from the typed identifier."""
    return (raw or "").strip()


def check_identifier_input(raw: str | None) -> str | None:
    """
    Check a typed identifier.

    Args:
        raw: Text as typed by the user

    Returns:
        str | None: Message to show next to the field, None when acceptable
    """
    identifier = normalize_identifier_input(raw)
    if not identifier:
        return "El NIT de tu empresa es requerido"
    if len(identifier) < MIN_IDENTIFIER_LENGTH:
        return f"El NIT debe tener al menos {MIN_IDENTIFIER_LENGTH} dígitos"
    if not is_valid_identifier(identifier):
        return "Ingresa el NIT sin puntos, guiones ni dígito de verificación (8 a 11 dígitos)"
    return None
