"""World file reading and writing.

Parsing, serialization, stream and path IO for the plain six-line world file
format, plus the sidecar naming convention used to locate the world file of
an image (`scene.tif` -> `scene.tfw`).

Public functions:
- `parse(text, strict=False)` -> WorldFile
- `to_text(world_file)` -> str
- `read_from_stream(stream)`, `read_from_path(path)`
- `write_to_stream(world_file, stream)`, `write_to_path(world_file, path)`
- `world_file_path(image_path)`, `candidate_paths(image_path)`,
  `find_world_file(image_path)`, `read_for_image(image_path)`
"""

from pathlib import Path
from typing import List, Optional, Union
import io
import logging
import re

from worldfile.config import (
    ENCODING,
    GENERIC_EXTENSION,
    LINE_ORDER,
    N_LINES,
    NEWLINE,
    PARSE_DEFAULTS,
    SIDECAR_EXTENSIONS,
)
from worldfile.errors import ParseError, WorldFileError, WorldFileIOError
from worldfile.transform import WorldFile
from worldfile.utils import safe_log_exception

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Locale independent decimal: sign, digits with optional fraction, optional exponent.
_NUMBER_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def _decode(data: Union[str, bytes], source=None) -> str:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode(ENCODING)
    except UnicodeDecodeError as e:
        raise WorldFileIOError(f'world file content is not valid {ENCODING}', path=source) from e


def _split_lines(text: str) -> List[str]:
    # '\n' only; a trailing '\r' belongs to the terminator
    lines = text.split(NEWLINE)
    if lines and lines[-1] == '':
        lines.pop()
    return [ln[:-1] if ln.endswith('\r') else ln for ln in lines]


def _parse_number(line: str, line_number: int) -> float:
    token = line.strip()
    if not _NUMBER_RE.fullmatch(token):
        name = LINE_ORDER[line_number - 1]
        raise ParseError(f'line {line_number} ({name}) is not a decimal number: {line!r}',
                         line_number=line_number, line=line)
    value = float(token)
    if value in (float('inf'), float('-inf')):
        raise ParseError(f'line {line_number} overflows a double: {line!r}',
                         line_number=line_number, line=line)
    return value


def parse(text: Union[str, bytes], strict: bool = PARSE_DEFAULTS['strict']) -> WorldFile:
    """Parse world file text into a `WorldFile`.

    Lines are read positionally in the order given by `config.LINE_ORDER`.
    Fewer than six lines, or a line that is not a number, raises
    `ParseError`; a zero scale raises `ValidationError`. Lines after the
    sixth are ignored unless `strict` is set, in which case any non-blank
    trailing line is an error.
    """
    lines = _split_lines(_decode(text))
    if len(lines) < N_LINES:
        raise ParseError(f'world file needs {N_LINES} lines, found {len(lines)}')

    values = {}
    for i, name in enumerate(LINE_ORDER):
        values[name] = _parse_number(lines[i], i + 1)

    extra = [(n, ln) for n, ln in enumerate(lines[N_LINES:], N_LINES + 1) if ln.strip()]
    if extra:
        if strict:
            line_number, line = extra[0]
            raise ParseError(f'unexpected content on line {line_number}: {line!r}',
                             line_number=line_number, line=line)
        logger.debug('ignoring %d trailing line(s) after the six coefficients', len(extra))

    return WorldFile(**values)


def to_text(world_file: WorldFile) -> str:
    """Render the six coefficients, one per line, in on-disk order.

    `repr` gives the shortest string that parses back to the same double,
    so `parse(to_text(w)) == w` holds exactly.
    """
    return ''.join(repr(float(getattr(world_file, name))) + NEWLINE for name in LINE_ORDER)


def read_from_stream(stream, strict: bool = PARSE_DEFAULTS['strict'], source=None) -> WorldFile:
    """Read an entire text or binary stream and parse it."""
    try:
        data = stream.read()
    except UnicodeDecodeError as e:
        # text streams decode inside read()
        safe_log_exception('undecodable world file stream', e, source=source)
        raise WorldFileIOError(f'world file content is not valid {ENCODING}', path=source) from e
    except OSError as e:
        safe_log_exception('failed reading world file stream', e, source=source)
        raise WorldFileIOError(f'could not read world file: {e}', path=source) from e
    return parse(_decode(data, source), strict=strict)


def read_from_path(path: PathLike, strict: bool = PARSE_DEFAULTS['strict']) -> WorldFile:
    """Open `path` for reading and parse its content.

    The file is closed on every exit path.
    """
    path = Path(path)
    try:
        f = open(path, 'rb')
    except OSError as e:
        safe_log_exception('failed opening world file', e, path=str(path))
        raise WorldFileIOError(f'could not open world file {path}: {e.strerror or e}', path=path) from e
    with f:
        wf = read_from_stream(f, strict=strict, source=path)
    logger.debug('read world file %s: %r', path, wf)
    return wf


def _is_binary(stream) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(stream, io.TextIOBase):
        return False
    return 'b' in getattr(stream, 'mode', '')


def write_to_stream(world_file: WorldFile, stream, target=None) -> None:
    """Write the six-line text to a text or binary stream.

    Streams that are neither `io` classes nor carry a `mode` are sent `str`
    first; if they reject it with `TypeError` the UTF-8 bytes are written.
    """
    text = to_text(world_file)
    binary = _is_binary(stream)
    try:
        try:
            stream.write(text.encode(ENCODING) if binary else text)
        except TypeError:
            if binary:
                raise
            stream.write(text.encode(ENCODING))
    except OSError as e:
        safe_log_exception('failed writing world file stream', e, target=target)
        raise WorldFileIOError(f'could not write world file: {e}', path=target) from e


def write_to_path(world_file: WorldFile, path: PathLike) -> None:
    """Create or truncate `path` and write the world file to it."""
    path = Path(path)
    try:
        f = open(path, 'w', encoding=ENCODING, newline='')
    except OSError as e:
        safe_log_exception('failed creating world file', e, path=str(path))
        raise WorldFileIOError(f'could not create world file {path}: {e.strerror or e}', path=path) from e
    try:
        with f:
            write_to_stream(world_file, f, target=path)
    except WorldFileError:
        raise
    except OSError as e:
        # close() flushes; a failure there is still a write failure
        safe_log_exception('failed flushing world file', e, path=str(path))
        raise WorldFileIOError(f'could not write world file {path}: {e}', path=path) from e
    logger.debug('wrote world file %s', path)


# ── sidecar naming ───────────────────────────────────────────────────────────
def world_file_path(image_path: PathLike) -> Path:
    """Conventional world file path for an image.

    Known extensions use `config.SIDECAR_EXTENSIONS`; any other extension
    keeps its first and last letter and appends 'w' (`.abc` -> `.acw`).
    The case of the image extension is preserved.
    """
    image_path = Path(image_path)
    ext = image_path.suffix
    if not ext:
        return image_path.with_suffix(GENERIC_EXTENSION)
    mapped = SIDECAR_EXTENSIONS.get(ext.lower())
    if mapped is None:
        body = ext[1:]
        mapped = '.' + body[0] + body[-1] + 'w' if len(body) > 1 else '.' + body + 'w'
    if ext[1:].isupper():
        mapped = mapped.upper()
    return image_path.with_suffix(mapped)


def candidate_paths(image_path: PathLike) -> List[Path]:
    """Ordered list of plausible world file paths for an image.

    Conventional name first, then the image extension plus 'w'
    (`.tif` -> `.tifw`), then the generic `.wld`, each also in upper case.
    """
    image_path = Path(image_path)
    candidates = [world_file_path(image_path)]
    if image_path.suffix:
        candidates.append(image_path.with_suffix(image_path.suffix + 'w'))
    candidates.append(image_path.with_suffix(GENERIC_EXTENSION))

    out: List[Path] = []
    for c in candidates:
        for variant in (c.with_suffix(c.suffix.lower()), c.with_suffix(c.suffix.upper())):
            if variant not in out:
                out.append(variant)
    return out


def find_world_file(image_path: PathLike) -> Optional[Path]:
    """Return the first existing world file for `image_path`, or None."""
    for candidate in candidate_paths(image_path):
        if candidate.is_file():
            return candidate
    return None


def read_for_image(image_path: PathLike, strict: bool = PARSE_DEFAULTS['strict']) -> WorldFile:
    """Locate and read the world file belonging to an image."""
    found = find_world_file(image_path)
    if found is None:
        raise WorldFileIOError(f'no world file found for image {image_path}', path=Path(image_path))
    return read_from_path(found, strict=strict)
