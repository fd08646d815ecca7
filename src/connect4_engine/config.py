"""
Configuration for the Connect Four search engine.
"""

# Board Configuration
BOARD_CONFIG = {
    'width': 7,                         # Columns
    'height': 6,                        # Rows
    'column_stride': 7,                 # Bits per column lane (height + guard bit)
}

WIDTH = BOARD_CONFIG['width']
HEIGHT = BOARD_CONFIG['height']
COLUMN_STRIDE = BOARD_CONFIG['column_stride']

# Scoring Configuration
# Larger than anything evaluate() may return
WIN_SCORE = 100

# Search Configuration
SEARCH_CONFIG = {
    'depth': 11,                        # Default search depth
    'notation': '722335',               # Default start position
    'representation': 'piece_list',     # 'piece_list' or 'bitboard'
    'mode': 'search',                   # 'search', 'negamax', 'perft' or 'play'
}

# Fingerprint keys: fixed seed so keys are identical across runs
ZOBRIST_CONFIG = {
    'seed': 42,
}
