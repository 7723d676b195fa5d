# Fixed rules of the game: four cards, each 1..13, combine to reach 24.
TARGET = 24
NUM_COUNT = 4
MIN_CARD = 1
MAX_CARD = 13
