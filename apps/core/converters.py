"""
URL path converters.
"""


class SignedIntConverter:
    """Like Django's ``int`` converter, but also matches negative numbers."""

    regex = '-?[0-9]+'

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(value)
