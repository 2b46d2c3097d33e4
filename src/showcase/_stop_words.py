"""Minimal stop word lists, keyed by Snowball language name.

Entries are already in normalized form (lowercase, accents kept).
"""

_ENGLISH: frozenset[str] = frozenset({
    # Articles and determiners
    "a", "an", "the", "this", "that", "these", "those",
    # Conjunctions and prepositions
    "and", "or", "but", "if", "in", "on", "at", "to", "for", "of",
    "with", "by", "as", "into", "from", "about", "between", "through",
    "during", "before", "after", "above", "below", "under", "over",
    # Pronouns
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her",
    "us", "them", "my", "your", "his", "its", "our", "their",
    "what", "which", "who", "whom", "whose",
    # Be/have/do forms
    "am", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    # Modals
    "will", "would", "shall", "should", "may", "might", "must",
    "can", "could",
    # Other function words
    "not", "no", "nor", "so", "too", "very", "just", "than", "then",
    "there", "here", "also", "only", "all", "each", "some", "any",
    # Contraction fragments left after punctuation is stripped
    "s", "t", "don", "doesn", "didn", "isn", "aren", "wasn", "ll", "ve", "re",
})

_SPANISH: frozenset[str] = frozenset({
    # Artículos
    "el", "la", "los", "las", "un", "una", "unos", "unas", "lo",
    # Preposiciones
    "a", "al", "ante", "bajo", "con", "contra", "de", "del", "desde",
    "en", "entre", "hacia", "hasta", "para", "por", "según", "sin",
    "sobre", "tras",
    # Conjunciones
    "y", "e", "o", "u", "ni", "pero", "sino", "que", "porque", "si",
    "como", "cuando", "donde",
    # Pronombres
    "yo", "tú", "él", "ella", "nosotros", "vosotros", "ellos", "ellas",
    "me", "te", "se", "nos", "os", "le", "les", "mi", "mis", "tu",
    "tus", "su", "sus", "este", "esta", "estos", "estas", "ese", "esa",
    "esos", "esas", "eso", "esto", "quien", "cual",
    # Ser/estar/haber
    "es", "son", "era", "fue", "ser", "está", "están", "estar",
    "ha", "han", "hay", "he",
    # Otras
    "no", "sí", "ya", "muy", "más", "menos", "también", "solo",
    "todo", "todos", "toda", "todas",
})

STOP_WORDS: dict[str, frozenset[str]] = {
    "english": _ENGLISH,
    "spanish": _SPANISH,
}
