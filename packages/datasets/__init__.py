from .wordlist import DATA_DIR, default_words_path, load_words, pick_target, read_lines

__all__ = ["DATA_DIR", "default_words_path", "load_words", "pick_target", "read_lines"]
