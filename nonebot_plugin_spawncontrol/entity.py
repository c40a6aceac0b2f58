import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class EntityType(str, Enum):
    """可生成的实体类型

    成员名（如 ``ZOMBIE``）即配置文件中使用的键，成员值为游戏内的实体 id。
    """

    DROPPED_ITEM = "item"
    EXPERIENCE_ORB = "experience_orb"
    AREA_EFFECT_CLOUD = "area_effect_cloud"
    ELDER_GUARDIAN = "elder_guardian"
    WITHER_SKELETON = "wither_skeleton"
    STRAY = "stray"
    EGG = "egg"
    LEASH_HITCH = "leash_knot"
    PAINTING = "painting"
    ARROW = "arrow"
    SNOWBALL = "snowball"
    FIREBALL = "fireball"
    SMALL_FIREBALL = "small_fireball"
    ENDER_PEARL = "ender_pearl"
    ENDER_SIGNAL = "eye_of_ender"
    SPLASH_POTION = "potion"
    THROWN_EXP_BOTTLE = "experience_bottle"
    ITEM_FRAME = "item_frame"
    WITHER_SKULL = "wither_skull"
    PRIMED_TNT = "tnt"
    FALLING_BLOCK = "falling_block"
    FIREWORK = "firework_rocket"
    HUSK = "husk"
    SPECTRAL_ARROW = "spectral_arrow"
    SHULKER_BULLET = "shulker_bullet"
    DRAGON_FIREBALL = "dragon_fireball"
    ZOMBIE_VILLAGER = "zombie_villager"
    SKELETON_HORSE = "skeleton_horse"
    ZOMBIE_HORSE = "zombie_horse"
    ARMOR_STAND = "armor_stand"
    DONKEY = "donkey"
    MULE = "mule"
    EVOKER_FANGS = "evoker_fangs"
    EVOKER = "evoker"
    VEX = "vex"
    VINDICATOR = "vindicator"
    ILLUSIONER = "illusioner"
    MINECART_COMMAND = "command_block_minecart"
    BOAT = "boat"
    MINECART = "minecart"
    MINECART_CHEST = "chest_minecart"
    MINECART_FURNACE = "furnace_minecart"
    MINECART_TNT = "tnt_minecart"
    MINECART_HOPPER = "hopper_minecart"
    MINECART_MOB_SPAWNER = "spawner_minecart"
    CREEPER = "creeper"
    SKELETON = "skeleton"
    SPIDER = "spider"
    GIANT = "giant"
    ZOMBIE = "zombie"
    SLIME = "slime"
    GHAST = "ghast"
    ZOMBIFIED_PIGLIN = "zombified_piglin"
    ENDERMAN = "enderman"
    CAVE_SPIDER = "cave_spider"
    SILVERFISH = "silverfish"
    BLAZE = "blaze"
    MAGMA_CUBE = "magma_cube"
    ENDER_DRAGON = "ender_dragon"
    WITHER = "wither"
    BAT = "bat"
    WITCH = "witch"
    ENDERMITE = "endermite"
    GUARDIAN = "guardian"
    SHULKER = "shulker"
    PIG = "pig"
    SHEEP = "sheep"
    COW = "cow"
    CHICKEN = "chicken"
    SQUID = "squid"
    WOLF = "wolf"
    MUSHROOM_COW = "mooshroom"
    SNOWMAN = "snow_golem"
    OCELOT = "ocelot"
    IRON_GOLEM = "iron_golem"
    HORSE = "horse"
    RABBIT = "rabbit"
    POLAR_BEAR = "polar_bear"
    LLAMA = "llama"
    LLAMA_SPIT = "llama_spit"
    PARROT = "parrot"
    VILLAGER = "villager"
    ENDER_CRYSTAL = "end_crystal"
    TURTLE = "turtle"
    PHANTOM = "phantom"
    TRIDENT = "trident"
    COD = "cod"
    SALMON = "salmon"
    PUFFERFISH = "pufferfish"
    TROPICAL_FISH = "tropical_fish"
    DROWNED = "drowned"
    DOLPHIN = "dolphin"
    CAT = "cat"
    PANDA = "panda"
    PILLAGER = "pillager"
    RAVAGER = "ravager"
    TRADER_LLAMA = "trader_llama"
    WANDERING_TRADER = "wandering_trader"
    FOX = "fox"
    BEE = "bee"
    HOGLIN = "hoglin"
    PIGLIN = "piglin"
    STRIDER = "strider"
    ZOGLIN = "zoglin"
    PIGLIN_BRUTE = "piglin_brute"
    AXOLOTL = "axolotl"
    GLOW_ITEM_FRAME = "glow_item_frame"
    GLOW_SQUID = "glow_squid"
    GOAT = "goat"
    MARKER = "marker"
    ALLAY = "allay"
    CHEST_BOAT = "chest_boat"
    FROG = "frog"
    TADPOLE = "tadpole"
    WARDEN = "warden"
    CAMEL = "camel"
    BLOCK_DISPLAY = "block_display"
    INTERACTION = "interaction"
    ITEM_DISPLAY = "item_display"
    SNIFFER = "sniffer"
    TEXT_DISPLAY = "text_display"
    FISHING_HOOK = "fishing_bobber"
    LIGHTNING = "lightning_bolt"
    PLAYER = "player"
    UNKNOWN = "unknown"

    @classmethod
    def resolve(cls, key: str) -> Optional["EntityType"]:
        """按成员名精确匹配（区分大小写），无法匹配时返回 ``None``"""
        return cls.__members__.get(key)


class Location(BaseModel):
    world: str
    x: float
    y: float
    z: float

    @property
    def block_x(self) -> int:
        return math.floor(self.x)

    @property
    def block_y(self) -> int:
        return math.floor(self.y)

    @property
    def block_z(self) -> int:
        return math.floor(self.z)

    def __str__(self) -> str:
        return f"{self.world} {self.block_x} {self.block_y} {self.block_z}"
