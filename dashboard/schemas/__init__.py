"""
Pydantic schemas for form validation and API responses.

Form models (FormModel subclasses) are validated through safe_parse and
never raise; response models describe what each endpoint returns.
"""
