# --- Game ---
STARTING_LIVES = 6        # Lives at the start of every episode

# --- Rewards ---
CORRECT_REWARD = 24.0     # Numerator, divided by the number of attempted letters
INCORRECT_REWARD = -1000.0

# --- File Paths ---
WORDLIST_PATH = './wordlist.txt'
RESULTS_DIR = 'results'
Q_TABLE_FILE = 'qtable.pkl'
CONFIG_FILE = 'config.json'
PLOT_FILE = 'training_results.png'

# --- Q-learning ---
LEARNING_RATE = 0.7
DISCOUNT = 1.0

# --- Training & Evaluation ---
WORD_COUNT = 10000        # Use at most this many words from the word list
PLAY_FOR = 5000000        # Number of games to train the agent on
PROGRESS_AT = 1000        # Print progress every N games
NUM_EPISODES_EVAL = 2000  # Number of games for evaluation
