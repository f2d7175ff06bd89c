"""
Default error message templates, keyed by resource name.

Templates use {property_name} for the display name of the property under
validation; individual validators add their own named placeholders.
"""

DEFAULT_MESSAGES: dict[str, str] = {
    "notnull_error": "'{property_name}' must not be empty.",
    "notempty_error": "'{property_name}' should not be empty.",
    "null_error": "'{property_name}' must be empty.",
    "empty_error": "'{property_name}' should be empty.",
    "equal_error": "'{property_name}' should be equal to '{comparison_value}'.",
    "notequal_error": "'{property_name}' should not be equal to '{comparison_value}'.",
    "length_error": (
        "'{property_name}' must be between {min_length} and {max_length} characters. "
        "You entered {total_length} characters."
    ),
    "exact_length_error": (
        "'{property_name}' must be {max_length} characters in length. "
        "You entered {total_length} characters."
    ),
    "max_length_error": (
        "The length of '{property_name}' must be {max_length} characters or fewer. "
        "You entered {total_length} characters."
    ),
    "min_length_error": (
        "The length of '{property_name}' must be at least {min_length} characters. "
        "You entered {total_length} characters."
    ),
    "lessthan_error": "'{property_name}' must be less than '{comparison_value}'.",
    "lessthanorequal_error": "'{property_name}' must be less than or equal to '{comparison_value}'.",
    "greaterthan_error": "'{property_name}' must be greater than '{comparison_value}'.",
    "greaterthanorequal_error": "'{property_name}' must be greater than or equal to '{comparison_value}'.",
    "inclusivebetween_error": (
        "'{property_name}' must be between {from} and {to}. You entered {value}."
    ),
    "exclusivebetween_error": (
        "'{property_name}' must be between {from} and {to} (exclusive). You entered {value}."
    ),
    "regex_error": "'{property_name}' is not in the correct format.",
    "email_error": "'{property_name}' is not a valid email address.",
    "predicate_error": "The specified condition was not met for '{property_name}'.",
}
