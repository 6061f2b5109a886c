class CountryException(Exception):
    pass


class CountryNotFoundError(CountryException):
    pass


class ProviderError(CountryException):
    pass
