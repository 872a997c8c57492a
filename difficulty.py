from collections import namedtuple

ClueRange = namedtuple("ClueRange", ["min_clues", "max_clues"])

DIFFICULTY_CLUE_RANGES = {
    'easy': ClueRange(36, 49),
    'medium': ClueRange(32, 35),
    'hard': ClueRange(26, 31),
    'expert': ClueRange(17, 25),
}

DEFAULT_DIFFICULTY = 'medium'


class UnsupportedDifficultyError(ValueError):
    def __init__(self, raw):
        super().__init__(f"Unsupported difficulty: {raw}")
        self.raw = raw


def valid_difficulties():
    return list(DIFFICULTY_CLUE_RANGES)


def parse_difficulty(raw):
    if raw is None or raw == '':
        return DEFAULT_DIFFICULTY
    if not isinstance(raw, str):
        raise UnsupportedDifficultyError(raw)

    candidate = raw.lower()
    if candidate in DIFFICULTY_CLUE_RANGES:
        return candidate

    raise UnsupportedDifficultyError(raw)


def pick_target_clues(clue_range, rng):
    """
    Draws a clue count uniformly from [min_clues, max_clues].
    An empty or inverted range collapses to min_clues.
    """
    if clue_range.max_clues <= clue_range.min_clues:
        return clue_range.min_clues
    return rng.randint(clue_range.min_clues, clue_range.max_clues)
