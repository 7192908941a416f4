class SelectorError(Exception):
    """Base selector building error."""
    pass

class RepeatError(SelectorError):
    """Element, id or pseudo-element appended more than once."""
    pass

class OrderError(SelectorError):
    """Selector parts appended out of order."""
    pass

class InvalidCombinatorError(SelectorError):
    """Combinator is not one of ' ', '+', '~', '>'."""
    pass

class ParseError(Exception):
    """Error rebuilding an object from JSON."""
    pass

class SerializationError(Exception):
    """Error encoding an object to JSON."""
    pass
