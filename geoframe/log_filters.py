import logging


class TruncatingFilter(logging.Filter):
    """Shorten oversized log messages and arguments, e.g. dumped point lists."""

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def _truncate(self, text: str) -> str:
        return f"{text[:self.max_length]}... ({len(text)} chars)"

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            shortened = []
            for arg in record.args:
                text = str(arg)
                shortened.append(self._truncate(text) if len(text) > self.max_length else arg)
            record.args = tuple(shortened)
        elif isinstance(record.msg, str) and len(record.msg) > self.max_length:
            # f-strings arrive already rendered
            record.msg = self._truncate(record.msg)
        return True
