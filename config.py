# config.py
"""
遊戲全局設定：迷宮佈局、格子尺寸、彈丸與水果的分數、精靈圖路徑和事件名稱。
"""

# 遊戲設定
CELL_SIZE = 24  # 每個格子的像素大小（拾取物尺寸的基本單位）
FPS = 60  # 每秒幀數
DEBUG_EVENTS = False  # 是否輸出每個發出的事件

# 迷宮圖塊
TILE_WALL = 'X'
TILE_PATH = ' '
TILE_PACDOT = 'o'
TILE_POWER_PELLET = 'O'
TILE_FRUIT = 'F'
TILE_PLAYER_START = 'P'

# 迷宮佈局（每行字數必須相同）
MAZE_LAYOUT = (
    "XXXXXXXXXXXXXXXXXXX",
    "XooooooooXooooooooX",
    "XOXXoXXXoXoXXXoXXOX",
    "XoooooooooooooooooX",
    "XoXXoXoXXXXXoXoXXoX",
    "XooooXoooXoooXooooX",
    "XXXXoXXX X XXXoXXXX",
    "XXXXoX       XoXXXX",
    "XXXXoX XXXXX XoXXXX",
    "XXXXo  X   X  oXXXX",
    "XXXXoX XXXXX XoXXXX",
    "XXXXoX   F   XoXXXX",
    "XXXXoX XXXXX XoXXXX",
    "XooooooooXooooooooX",
    "XoXXoXXXoXoXXXoXXoX",
    "XOoXoooooPoooooXoOX",
    "XXoXoXoXXXXXoXoXoXX",
    "XooooXoooXoooXooooX",
    "XoXXXXXXoXoXXXXXXoX",
    "XoooooooooooooooooX",
    "XXXXXXXXXXXXXXXXXXX",
)
MAZE_WIDTH = len(MAZE_LAYOUT[0])
MAZE_HEIGHT = len(MAZE_LAYOUT)

# 拾取物類型
PICKUP_PACDOT = 'pacdot'
PICKUP_POWER_PELLET = 'powerPellet'
PICKUP_FRUIT = 'fruit'

# 精靈圖
SPRITE_BASE_PATH = 'app/style/graphics/spriteSheets/pickups/'
DEFAULT_FRUIT_SPRITE = 'cherry'
FRUIT_SPRITES = {
    100: 'cherry',
    300: 'strawberry',
    500: 'orange',
    700: 'apple',
    1000: 'melon',
    2000: 'galaxian',
    3000: 'bell',
    5000: 'key',
}

# 分數
PACDOT_POINTS = 10
POWER_PELLET_POINTS = 50
# 各關卡水果的分數，超過最後一關沿用最後的值
FRUIT_LEVEL_POINTS = (100, 300, 500, 500, 700, 700, 1000, 1000, 2000, 2000, 3000, 3000, 5000)
FRUIT_DOT_THRESHOLDS = (70, 170)  # 吃掉多少個豆子後出現水果
FRUIT_DURATION = 10 * FPS  # 水果停留時間（幀）
POWER_UP_DURATION = 6 * FPS  # 能量狀態持續時間（幀）

# 事件名稱
EVENT_AWARD_POINTS = 'awardPoints'
EVENT_DOT_EATEN = 'dotEaten'
EVENT_POWER_UP = 'powerUp'

# 顏色定義
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
BLUE = (33, 33, 222)
ORANGE = (255, 184, 151)
PINK = (255, 184, 255)
