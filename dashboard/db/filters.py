"""
PostgREST filter builders shared by the invoice and customer searches.
"""


def customer_match_filter(query: str) -> str:
    """
    Build an or-filter matching customer name OR email, case-insensitively.

    The value is double-quoted so commas and parentheses in the search text
    do not break the filter syntax.

    >>> customer_match_filter("ada")
    'name.ilike."*ada*",email.ilike."*ada*"'
    """
    term = query.replace("\\", "\\\\").replace('"', '\\"')
    pattern = f'"*{term}*"'
    return f"name.ilike.{pattern},email.ilike.{pattern}"
