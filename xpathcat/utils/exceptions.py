class XPathCatError(Exception):
    """Base exception for failures local to a single input."""

    event = "input_failed"

    def __init__(self, label: str, detail: str):
        self.label = label
        self.detail = detail
        super().__init__(f"{label}: {detail}")


class InputReadError(XPathCatError):
    event = "input_read_failed"


class DocumentParseError(XPathCatError):
    event = "document_parse_failed"


class ContextError(XPathCatError):
    event = "context_failed"


class EvaluationError(XPathCatError):
    event = "evaluation_failed"

    def __init__(self, label: str, expression: str, detail: str):
        self.expression = expression
        super().__init__(label, detail)
