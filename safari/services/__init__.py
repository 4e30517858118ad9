from safari.errors import ValidationError


def require_text(data, fields):
    """Each field must be a non-empty string."""
    for field in fields:
        value = data.get(field)
        if value in (None, ''):
            raise ValidationError()
        if not isinstance(value, str):
            raise ValidationError(f'{field} must be a string')
