from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from http import HTTPStatus

from requests.structures import CaseInsensitiveDict

from restdocs_testclient import constants


@dataclass(frozen=True)
class ResponseCookie:
    name: str
    value: str = ""
    max_age: int | None = None
    domain: str | None = None
    path: str | None = None
    secure: bool = False
    http_only: bool = False

    def to_set_cookie_header(self) -> str:
        """
        Render the cookie as the value of a Set-Cookie header,
        e.g. "name=value; Domain=localhost; HttpOnly"
        """
        header = f"{self.name}={self.value or ''}"
        if self.max_age is not None and self.max_age > -1:
            header += f"; Max-Age={self.max_age}"
        if self.domain:
            header += f"; Domain={self.domain}"
        if self.path:
            header += f"; Path={self.path}"
        if self.secure:
            header += "; Secure"
        if self.http_only:
            header += "; HttpOnly"
        return header

    def __str__(self) -> str:
        return self.to_set_cookie_header()


@dataclass(frozen=True)
class MediaType:
    type: str
    subtype: str
    parameters: tuple[tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """
        Parses a media type such as "text/plain;charset=UTF-8"

        Type, subtype and parameter names are lower-cased, as is the charset value,
        so that equal media types compare equal regardless of how they were written.
        """
        parts = value.split(";")
        full_type = parts[0].strip()
        type_, _, subtype = full_type.partition("/")
        if not type_ or not subtype:
            raise ValueError(f"Invalid media type: {value!r}")

        parameters = {}
        for part in parts[1:]:
            part = part.strip()
            if not part:
                continue
            name, separator, parameter_value = part.partition("=")
            if not separator:
                raise ValueError(f"Invalid media type parameter {part!r} in {value!r}")
            name = name.strip().lower()
            parameter_value = parameter_value.strip().strip('"')
            if name == "charset":
                parameter_value = parameter_value.lower()
            parameters[name] = parameter_value

        return cls(type_.strip().lower(), subtype.strip().lower(), tuple(sorted(parameters.items())))

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def charset(self) -> str | None:
        return dict(self.parameters).get("charset")

    def __str__(self) -> str:
        return ";".join([self.essence] + [f"{name}={value}" for name, value in self.parameters])


class HttpHeaders(Mapping[str, list[str]]):
    """
    Immutable, ordered, case-insensitive mapping of header name to all of its values

    The casing of a name is taken from the first time it is seen.
    """

    _values: CaseInsensitiveDict

    def __init__(self, items: Iterable[tuple[str, str]] = ()):
        self._values = CaseInsensitiveDict()
        for name, value in items:
            existing = self._values.get(name)
            if existing is None:
                self._values[name] = [value]
            else:
                existing.append(value)

    @classmethod
    def of(
        cls, headers: "HttpHeaders | Mapping[str, str | list[str]] | Iterable[tuple[str, str]] | None"
    ) -> "HttpHeaders":
        if headers is None:
            return cls()
        if isinstance(headers, HttpHeaders):
            return headers
        if isinstance(headers, Mapping):
            return cls(flatten_headers(headers))
        return cls(headers)

    def __getitem__(self, name: str) -> list[str]:
        return list(self._values[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, HttpHeaders):
            return self._values == other._values
        if isinstance(other, Mapping):
            try:
                other_headers = HttpHeaders.of(other)
            except TypeError:
                # values that are neither strings nor lists of strings
                return NotImplemented
            return self == other_headers
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset((name, tuple(values)) for name, values in self._values.lower_items()))

    def __repr__(self) -> str:
        return f"HttpHeaders({self.to_dict()!r})"

    def get_first(self, name: str) -> str | None:
        values = self._values.get(name)
        return values[0] if values else None

    def multi_items(self) -> list[tuple[str, str]]:
        return [(name, value) for name, values in self._values.items() for value in values]

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self._values.items()}

    def with_values(self, name: str, values: list[str]) -> "HttpHeaders":
        """
        Returns a copy with all values for name replaced (keeping its position if already present)
        """
        items = []
        replaced = False
        for existing_name, existing_values in self._values.items():
            if existing_name.lower() == name.lower():
                items.extend((existing_name, value) for value in values)
                replaced = True
            else:
                items.extend((existing_name, value) for value in existing_values)
        if not replaced:
            items.extend((name, value) for value in values)
        return HttpHeaders(items)

    @property
    def content_type(self) -> MediaType | None:
        value = self.get_first(constants.CONTENT_TYPE)
        return MediaType.parse(value) if value else None

    @property
    def content_length(self) -> int | None:
        value = self.get_first(constants.CONTENT_LENGTH)
        return int(value) if value is not None else None


def flatten_headers(headers: Mapping[str, str | list[str]]) -> list[tuple[str, str]]:
    items = []
    for name, values in headers.items():
        if isinstance(values, str):
            items.append((name, values))
        else:
            items.extend((name, value) for value in values)
    return items


@dataclass(frozen=True)
class OperationResponse:
    """
    A framework-agnostic HTTP response, ready to be documented

    status_code is always set; status is None when the code is not a standard HTTP status.
    """

    status_code: int
    headers: HttpHeaders
    content: bytes = b""

    @property
    def status(self) -> HTTPStatus | None:
        try:
            return HTTPStatus(self.status_code)
        except ValueError:
            return None

    def get_content_as_string(self, default_charset: str = constants.DEFAULT_CHARSET) -> str:
        if not self.content:
            return ""
        content_type = self.headers.content_type
        charset = content_type.charset if content_type and content_type.charset else default_charset
        try:
            return self.content.decode(charset)
        except LookupError as e:
            raise ValueError(f"Unsupported charset {charset!r} for response content") from e
