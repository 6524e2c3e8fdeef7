class LoadError(Exception):
    """Raised when the dashboard data could not be loaded"""
    def __init__(self, message="Failed to load the income data"):
        self.message = message
        super().__init__(self.message)


class FetchError(LoadError):
    """Raised when retrieving the income document does not succeed"""
    def __init__(self, message="Erro ao carregar o arquivo JSON", status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ParseError(LoadError):
    """Raised when the income document is not a valid income dataset"""
    def __init__(self, message="Invalid income data"):
        super().__init__(message)


class EmptyDatasetError(LoadError):
    """Raised when the income dataset holds no dates to aggregate"""
    def __init__(self, message="The income dataset has no dates"):
        super().__init__(message)
