"""
constants.py: Centralized configuration for game physics, timing and layout.
"""

# -------- Frame & Screen Config --------
FPS = 60                        # Every per-frame increment assumes this rate
SCREEN_WIDTH = 288
SCREEN_HEIGHT = 512
GROUND_HEIGHT = 112
GROUND_Y = SCREEN_HEIGHT - GROUND_HEIGHT
GROUND_TILE_WIDTH = 336         # Ground strip wraps after scrolling one tile overhang

# -------- Bird Config --------
BIRD_X = 80                     # Fixed bird X position
BIRD_BASELINE_Y = 246           # Hover line in menu / ready
BIRD_RADIUS = 7                 # For collision detection
BIRD_ANIMATION = (0, 1, 2, 1)   # Wing sprite index per animation step
IDLE_FLAP_PERIOD = 10           # Frames per animation step while hovering
ACTIVE_FLAP_PERIOD = 5          # Frames per animation step while flying
HOVER_PERIOD = 15.0             # Frames per radian of the hover wave
HOVER_AMPLITUDE = 1.5           # Pixels

# -------- Physics Config (Pixels / Frame) --------
GRAVITY = 0.3                   # Vertical acceleration (pixels/frame^2)
JUMP_VELOCITY = -5.0            # Velocity set by a flap (pixels/frame)
TERMINAL_VELOCITY = 8.0         # Fall speed cap (pixels/frame)
FLAP_ROT_VELOCITY = -10.0       # Nose-up spin on flap (degrees/frame)
FLAP_ROT_ACCEL = 0.4            # Nose-down pull after flap (degrees/frame^2)
DIVE_ROT_VELOCITY = 30.0        # Spin applied on game over (degrees/frame)
MIN_ROTATION = -20.0            # Degrees
MAX_ROTATION = 90.0             # Degrees

# -------- Pipe Config --------
PIPE_SPEED = 2                  # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL = 79        # 157px spacing / 2px per frame ~= 78.5 frames
PIPE_WIDTH = 52
PIPE_HEIGHT = 320
PIPE_GAP = 96
PIPE_GAP_MIN = 84               # Inclusive range for the gap's top edge
PIPE_GAP_MAX = 264
PIPE_DESPAWN_MARGIN = 50        # Removed once right edge passes x = -50

# -------- Screen Flow Config --------
FADE_STEP = 0.05                # Fade overlay opacity per frame
FLASH_DECAY = 0.1               # Game-over flash opacity per frame
SPLASH_AUTO_FRAMES = 120        # Splash advances by itself after this many frames
OVER_INPUT_DELAY_FRAMES = 60    # Game-over buttons ignore taps until then
NOTICE_FRAMES = 150             # Lifetime of an on-screen notice
DIE_SOUND_DELAY = 0.5           # Seconds between the hit and die sounds

# -------- Cosmetics --------
BIRD_COLORS = 3                 # yellow, blue, red
BACKGROUNDS = 2                 # day, night

# -------- Buttons (center x, center y, width, height) --------
PLAY_BUTTON = (78, 340, 116, 70)
SCORE_BUTTON = (210, 340, 116, 70)
LEADERBOARD_NOTICE = "Leaderboard is not available offline"

# -------- Sounds --------
SOUND_WING = "wing"
SOUND_HIT = "hit"
SOUND_DIE = "die"
SOUND_POINT = "point"
SOUND_SWOOSHING = "swooshing"
SOUND_NAMES = (SOUND_WING, SOUND_HIT, SOUND_DIE, SOUND_POINT, SOUND_SWOOSHING)

# -------- Persistence --------
DB_FILE = "flappy_scores.db"
BEST_SCORE_KEY = "flappy_best"
