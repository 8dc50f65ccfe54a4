"""Map judge language labels to conventional source file names."""

import logging
from types import MappingProxyType
from typing import Tuple


logger = logging.getLogger(__name__)

BASE_NAME = "Main"
FALLBACK_EXTENSION = ".txt"

# Checked first and in order: these labels carry a version suffix
# (e.g. "C++14", "Python3", "PyPy3").
PREFIX_EXTENSIONS: Tuple[Tuple[str, str], ...] = (
    ("C++", ".cpp"),
    ("Bash", ".sh"),
    ("Common Lisp", ".lisp"),
    ("Python", ".py"),
    ("PyPy", ".py"),
)

EXACT_EXTENSIONS = MappingProxyType({
    "C": ".c",
    "C#": ".cs",
    "Clojure": ".clj",
    "D": ".d",
    "Fortran": ".f08",
    "Go": ".go",
    "Haskell": ".hs",
    "JavaScript": ".js",
    "Java": ".java",
    "OCaml": ".ml",
    "Pascal": ".pas",
    "Perl": ".pl",
    "PHP": ".php",
    "Ruby": ".rb",
    "Scala": ".scala",
    "Scheme": ".scm",
    "Text": ".txt",
    "Visual Basic": ".vb",
    "Objective-C": ".m",
    "Swift": ".swift",
    "Rust": ".rs",
    "Sed": ".sed",
    "Awk": ".awk",
    "Brainfuck": ".bf",
    "Standard ML": ".sml",
    "Crystal": ".cr",
    "F#": ".fs",
    "Unlambda": ".unl",
    "Lua": ".lua",
    "LuaJIT": ".lua",
    "MoonScript": ".moon",
    "Ceylon": ".ceylon",
    "Julia": ".jl",
    "Octave": ".m",
    "Nim": ".nim",
    "TypeScript": ".ts",
    "Perl6": ".p6",
    "Kotlin": ".kt",
    "COBOL": ".cob",
})


def canonical_language(label: str) -> str:
    """Strip the compiler details, e.g. "C++14 (GCC 5.4.1)" -> "C++14"."""
    return label.split("(", 1)[0].strip()


def language_extension(label: str) -> str:
    language = canonical_language(label)
    for prefix, extension in PREFIX_EXTENSIONS:
        if language.startswith(prefix):
            return extension

    extension = EXACT_EXTENSIONS.get(language)
    if extension is None:
        logger.warning("Unknown language %r, saving as %s", label, FALLBACK_EXTENSION)
        return FALLBACK_EXTENSION
    return extension


def language_to_filename(label: str) -> str:
    """File name for a submission written in ``label``, e.g. "Main.cpp"."""
    return BASE_NAME + language_extension(label)
