"""Parser adapter — turns one Java source file into a javalang AST."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import javalang
from javalang.parser import JavaParserError, JavaSyntaxError, Parser
from javalang.tokenizer import JavaToken, LexerError, Position

from reposcope.domain.exceptions import SourceParseError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParsedUnit:
    """A compilation unit plus the token stream it was parsed from.

    The tokens are kept so statements can be rendered back to source text.
    """

    path: str
    tree: javalang.tree.CompilationUnit
    tokens: list[JavaToken]
    _positions: dict[Position, int] | None = field(default=None, repr=False)

    def token_index(self, position: Position | None) -> int | None:
        """Index of the token starting at ``position``, if any."""
        if position is None:
            return None
        if self._positions is None:
            self._positions = {tok.position: i for i, tok in enumerate(self.tokens)}
        return self._positions.get(position)


def parse_source(text: str, path: str = "<memory>") -> ParsedUnit:
    """Parse Java source text; raise :class:`SourceParseError` when it is not valid."""
    try:
        tokens = list(javalang.tokenizer.tokenize(text))
        tree = Parser(tokens).parse()
    except LexerError as exc:
        raise SourceParseError(f"Lexer error in {path}: {exc}") from exc
    except JavaSyntaxError as exc:
        raise SourceParseError(f"Syntax error in {path}: {exc.description}") from exc
    except JavaParserError as exc:
        raise SourceParseError(f"Parser error in {path}: {exc}") from exc
    except StopIteration as exc:
        # javalang runs off the token list on truncated input
        raise SourceParseError(f"Unexpected end of input in {path}") from exc
    except (TypeError, AttributeError, IndexError) as exc:
        # javalang hits its None end-of-input sentinel mid-expression
        raise SourceParseError(f"Malformed source in {path}: {exc}") from exc
    return ParsedUnit(path=path, tree=tree, tokens=tokens)


def parse_source_file(path: Path, encoding: str = "utf-8") -> ParsedUnit | None:
    """Read and parse ``path``; ``None`` (with a warning) when that fails."""
    try:
        text = Path(path).read_bytes().decode(encoding)
        return parse_source(text, str(path))
    except (OSError, UnicodeDecodeError, SourceParseError) as exc:
        logger.warning("Failed to parse file: %s (%s)", Path(path).absolute(), exc)
        return None
