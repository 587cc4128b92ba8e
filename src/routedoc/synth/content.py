"""Content-type negotiation for generated operations."""

JSON = "application/json"
FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"

ACCEPT_TYPES = [JSON, FORM_URLENCODED, MULTIPART]


def resolve_consumes(parameters: list[dict]) -> list[str]:
    """Pick the request media type from an operation's final parameter list.

    File uploads win over form fields, form fields win over JSON.
    """
    if any(p.get("type") == "file" for p in parameters):
        return [MULTIPART]
    if any(p.get("in") == "formData" for p in parameters):
        return [FORM_URLENCODED]
    return [JSON]
