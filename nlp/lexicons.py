"""
Detector de Idiomas — Lexicons
Hand-curated Spanish / English tables used by the feature analyzers.
All tables are frozensets built once at import and never mutated.
"""

# ── Stop words ────────────────────────────────────────────────────────────────
SPANISH_STOPWORDS = frozenset({
    "el", "la", "de", "que", "y", "a", "en", "un", "es", "se", "no", "te", "lo", "le",
    "da", "su", "por", "son", "con", "para", "al", "del", "los", "las", "una", "pero",
    "sus", "muy", "ya", "está", "ser", "como", "más", "este", "esta", "año",
    "todo", "también", "había", "fue", "han", "hacer", "puede", "tiempo",
})

ENGLISH_STOPWORDS = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for", "not",
    "on", "with", "he", "as", "you", "do", "at", "this", "but", "his", "by", "from",
    "they", "we", "say", "her", "she", "or", "an", "will", "my", "one", "all", "would",
    "there", "their", "what", "so", "up", "out", "if", "about", "who", "get", "which",
})

# ── Bigrams (2-char sequences) ────────────────────────────────────────────────
SPANISH_BIGRAMS = frozenset({
    "es", "en", "de", "la", "el", "ar", "er", "ir", "ón", "ía", "ad", "qu", "ll", "rr",
})

ENGLISH_BIGRAMS = frozenset({
    "th", "he", "in", "er", "an", "ed", "nd", "to", "en", "ti", "te", "or", "st", "ar",
})

# ── Word endings ──────────────────────────────────────────────────────────────
SPANISH_ENDINGS = frozenset({
    "ción", "ando", "endo", "ado", "ido", "mente", "dad", "tad",
})

ENGLISH_ENDINGS = frozenset({
    "tion", "ing", "ed", "ly", "ness", "ful", "less", "ment",
})

# Letters that survive bigram cleaning, and the accented subset that marks Spanish
SPANISH_CHARACTERS = "ñáéíóúü"
