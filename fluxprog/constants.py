"""Numeric codes shared by the flowchart editor, its file format and the robot link."""

from enum import IntEnum, unique

MEMORY_BLOCK = "memory"
MEMORY_BLOCK_SIZE = 65536
MEMORY_COMMAND = "command"
MEMORY_ABSTRACTION = "abstraction_level"
MEMORY_FEEDBACK = "feedback"
MEMORY_VISION_SENSOR = "reading_VS"
MEMORY_ULTRASONIC_SENSOR = "readin_US"
MEMORY_COLOR_SENSOR = "readin_COLOR"
MEMORY_ROBOT_TYPE = "robot_type"

N_ULTRASONIC = 3
N_BLACK_TAPE_SENSOR = 5
N_COLOR_SENSOR = 2

MAX_BLOCKS = 100

SCROLL_BAR_Y_BEGIN = 84
DISPLAY_WIDTH = 800
DISPLAY_HEIGHT = 630
ROLL_BAR_WIDTH = 20
ROLL_BAR_HEIGHT = 30

TIMEOUT = 5.0


@unique
class MenuCommand(IntEnum):
    """Items of the editor menus, as reported by a click."""

    PLAY = 1
    PAUSE = 2
    STOP = 3
    SAVE = 4
    LOAD = 5
    SAVE_AS = 6
    PHYSICAL_ROBOT = 7
    VIRTUAL_ROBOT = 8
    CONDITIONAL_BLOCK = 9
    ACTION_BLOCK = 10
    START_BLOCK = 11
    END_BLOCK = 12
    MERGE_BLOCK = 13
    LOOP_BLOCK = 14
    BLACK_TAPE_SENSOR_MENU = 15
    SENSOR_COLOR_MENU = 16
    ULTRASONIC_SENSOR_MENU = 17
    MOVE_FORWARD_BLOCK = 18
    TURN_LEFT_BLOCK = 19
    TURN_RIGHT_BLOCK = 20
    N_LOOP_BLOCK = 21
    T_LOGIC_BLOCK = 22
    F_LOGIC_BLOCK = 23


@unique
class BlockType(IntEnum):
    """Kinds of flowchart block; the values are those written to files."""

    CONDITIONAL = 9
    ACTION = 10
    START = 11
    END = 12
    MERGE = 13
    LOOP = 14


@unique
class Sensor(IntEnum):
    """Sensors a conditional block can test."""

    BLACK_SENSOR_1 = 1
    BLACK_SENSOR_2 = 2
    BLACK_SENSOR_3 = 3
    BLACK_SENSOR_4 = 4
    BLACK_SENSOR_5 = 5
    COLOR_SENSOR_1 = 6
    COLOR_SENSOR_2 = 7
    ULTRASONIC_SENSOR_1 = 8
    ULTRASONIC_SENSOR_2 = 9
    ULTRASONIC_SENSOR_3 = 10


@unique
class RobotCommand(IntEnum):
    """Commands and states exchanged between the editor and the robot back end."""

    CLOSE_PROGRAM = -10
    CONNECT_ERROR = -5
    COLISION = -2
    CONNECT = -1
    EXECUTING = 0
    READY = 1
    TURN_LEFT = 4
    TURN_RIGHT = 6
    MOVE_FORWARD = 8


@unique
class AbstractionLevel(IntEnum):
    """How much of the robot's behaviour the user programs directly."""

    HIGH = 0
    MID = 1
    LOW = 2