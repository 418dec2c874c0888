from swearjar.wordlists.loader import load_word_file, read_word_lines

__all__ = ["read_word_lines", "load_word_file"]
