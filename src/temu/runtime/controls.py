from pathlib import Path

from temu.common.hwconf import RATE_MIN, RATE_MAX, DEFAULT_RATE


class SourceProvider:
    def source_text(self) -> str:
        raise NotImplementedError()


class TextSource(SourceProvider):
    def __init__(self, text: str = ''):
        self.text = text

    def source_text(self) -> str:
        return self.text


class FileSource(SourceProvider):
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def source_text(self) -> str:
        return self.path.read_text(encoding='utf-8')


class RateControl:
    def rate(self) -> float:
        raise NotImplementedError()


class FixedRate(RateControl):
    ''' Instructions per second, kept within [RATE_MIN, RATE_MAX] '''

    def __init__(self, value: float = DEFAULT_RATE):
        self.value = value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float):
        self._value = min(max(value, RATE_MIN), RATE_MAX)

    def rate(self) -> float:
        return self.value
