class UriGrammarException(Exception):
    pass


class InvalidPattern(UriGrammarException):
    pass


class InvalidURI(UriGrammarException, ValueError):
    def __init__(self, text: str):
        super().__init__('Not a valid URI: {!r}'.format(text))
        self.text: str = text
