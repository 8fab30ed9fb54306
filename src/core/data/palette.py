"""
Palette & Emoji tables — process-wide immutable lookup data

COLOR_MAP: Photon design tokens
(https://github.com/FirefoxUX/design-tokens, photon-colors.json).
COLORS: цвета COLOR_MAP, упорядоченные по имени (byte order).
EMOJIS: таблица символов в фиксированном порядке.

Порядок обеих последовательностей — часть контракта воспроизводимости:
любое изменение порядка меняет все сгенерированные иконки.
"""

from types import MappingProxyType
from typing import Final, Mapping, Tuple

from src.core.domain.color import Color

COLOR_MAP: Final[Mapping[str, Color]] = MappingProxyType(
    {
        "blue40": Color(r=0x45, g=0xa1, b=0xff),
        "blue50": Color(r=0x0a, g=0x84, b=0xff),
        "blue60": Color(r=0x00, g=0x60, b=0xdf),
        "blue70": Color(r=0x00, g=0x3e, b=0xaa),
        "blue80": Color(r=0x00, g=0x22, b=0x75),
        "blue90": Color(r=0x00, g=0x0f, b=0x40),
        "green50": Color(r=0x30, g=0xe6, b=0x0b),
        "green60": Color(r=0x12, g=0xbc, b=0x00),
        "green70": Color(r=0x05, g=0x8b, b=0x00),
        "green80": Color(r=0x00, g=0x65, b=0x04),
        "green90": Color(r=0x00, g=0x37, b=0x06),
        "grey10": Color(r=0xf9, g=0xf9, b=0xfa),
        "grey20": Color(r=0xed, g=0xed, b=0xf0),
        "grey30": Color(r=0xd7, g=0xd7, b=0xdb),
        "grey40": Color(r=0xb1, g=0xb1, b=0xb3),
        "grey50": Color(r=0x73, g=0x73, b=0x73),
        "grey60": Color(r=0x4a, g=0x4a, b=0x4f),
        "grey70": Color(r=0x38, g=0x38, b=0x3d),
        "grey80": Color(r=0x2a, g=0x2a, b=0x2e),
        "grey90": Color(r=0x0c, g=0x0c, b=0x0d),
        "ink70": Color(r=0x36, g=0x39, b=0x59),
        "ink80": Color(r=0x20, g=0x23, b=0x40),
        "ink90": Color(r=0x0f, g=0x11, b=0x26),
        "magenta50": Color(r=0xff, g=0x1a, b=0xd9),
        "magenta60": Color(r=0xed, g=0x00, b=0xb5),
        "magenta70": Color(r=0xb5, g=0x00, b=0x7f),
        "magenta80": Color(r=0x7d, g=0x00, b=0x4f),
        "magenta90": Color(r=0x44, g=0x00, b=0x27),
        "orange50": Color(r=0xff, g=0x94, b=0x00),
        "orange60": Color(r=0xd7, g=0x6e, b=0x00),
        "orange70": Color(r=0xa4, g=0x49, b=0x00),
        "orange80": Color(r=0x71, g=0x2b, b=0x00),
        "orange90": Color(r=0x3e, g=0x13, b=0x00),
        "purple50": Color(r=0x94, g=0x00, b=0xff),
        "purple60": Color(r=0x80, g=0x00, b=0xd7),
        "purple70": Color(r=0x62, g=0x00, b=0xa4),
        "purple80": Color(r=0x44, g=0x00, b=0x71),
        "purple90": Color(r=0x25, g=0x00, b=0x3e),
        "red50": Color(r=0xff, g=0x00, b=0x39),
        "red60": Color(r=0xd7, g=0x00, b=0x22),
        "red70": Color(r=0xa4, g=0x00, b=0x0f),
        "red80": Color(r=0x5a, g=0x00, b=0x02),
        "red90": Color(r=0x3e, g=0x02, b=0x00),
        "teal50": Color(r=0x00, g=0xfe, b=0xff),
        "teal60": Color(r=0x00, g=0xc8, b=0xd7),
        "teal70": Color(r=0x00, g=0x8e, b=0xa4),
        "teal80": Color(r=0x00, g=0x5a, b=0x71),
        "teal90": Color(r=0x00, g=0x2d, b=0x3e),
        "yellow50": Color(r=0xff, g=0xe9, b=0x00),
        "yellow60": Color(r=0xd7, g=0xb6, b=0x00),
        "yellow70": Color(r=0xa4, g=0x7f, b=0x00),
        "yellow80": Color(r=0x71, g=0x51, b=0x00),
        "yellow90": Color(r=0x3e, g=0x28, b=0x00),
    }
)

COLORS: Final[Tuple[Color, ...]] = tuple(COLOR_MAP[name] for name in sorted(COLOR_MAP))

# fmt: off
EMOJIS: Final[Tuple[str, ...]] = (
    "😄", "😃", "😀", "😊", "😉", "😍", "😘", "😚", "😗", "😙", "😜", "😝", "😛",
    "😳", "😁", "😔", "😌", "😒", "😞", "😣", "😢", "😂", "😭", "😪", "😥", "😰",
    "😅", "😓", "😨", "😱", "😠", "😡", "😤", "😖", "😆", "😋", "😷", "😎", "😴",
    "😵", "😲", "😟", "😦", "😧", "😈", "👿", "😮", "😬", "😐", "😯", "😶", "😇",
    "😏", "😑", "👼", "😺", "😻", "😽", "😼", "🙀", "😿", "😹", "😾", "👹", "👺",
    "🙈", "🙉", "🙊", "💀", "👽", "💩", "🔥", "✨", "🌟", "💫", "💥", "💦", "💧",
    "💤", "👂", "👀", "👃", "👅", "👄", "👍", "👎", "👌", "👊", "✊", "👋", "✋",
    "👐", "👆", "🙌", "🙏", "👏", "💪", "💃", "🎩", "👑", "👒", "👟", "👞", "👡",
    "👠", "👢", "💼", "👜", "👝", "👛", "👓", "🎀", "🌂", "💄", "💛", "💙", "💜",
    "💚", "💔", "💗", "💓", "💕", "💖", "💞", "💘", "💌", "💋", "💍", "💎", "👣",
    "🐶", "🐺", "🐱", "🐭", "🐹", "🐰", "🐸", "🐯", "🐨", "🐻", "🐷", "🐽", "🐮",
    "🐗", "🐵", "🐒", "🐴", "🐑", "🐘", "🐼", "🐧", "🐦", "🐤", "🐥", "🐣", "🐔",
    "🐍", "🐢", "🐛", "🐝", "🐜", "🐞", "🐌", "🐙", "🐚", "🐠", "🐟", "🐬", "🐳",
    "🐋", "🐄", "🐏", "🐀", "🐃", "🐅", "🐇", "🐉", "🐎", "🐐", "🐓", "🐕", "🐖",
    "🐁", "🐂", "🐲", "🐡", "🐊", "🐫", "🐪", "🐆", "🐈", "🐩", "🐾", "💐", "🌸",
    "🌷", "🍀", "🌹", "🌻", "🌺", "🍁", "🍃", "🍂", "🌿", "🌾", "🍄", "🌵", "🌴",
    "🌲", "🌳", "🌰", "🌱", "🌼", "🌐", "🌞", "🌝", "🌚", "🌜", "🌛", "🌙", "🌍",
    "🌎", "🌏", "⭐", "⛅", "⛄", "🌀", "💝", "🎒", "🎓", "🎏", "🎃", "👻", "🎄",
    "🎁", "🎋", "🎉", "🎈", "🔮", "🎥", "📷", "📹", "📼", "💿", "📀", "💽", "💾",
    "💻", "📱", "📞", "📟", "📠", "📡", "📺", "📻", "🔊", "🔔", "📢", "⏳", "⏰",
    "🔓", "🔒", "🔏", "🔐", "🔑", "🔎", "💡", "🔦", "🔆", "🔅", "🔌", "🔋", "🔍",
    "🛁", "🚿", "🚽", "🔧", "🔨", "🚪", "💣", "🔫", "🔪", "💊", "💉", "💰", "💸",
    "📨", "📬", "📌", "📎", "📕", "📓", "📚", "📖", "🔬", "🔭", "🎨", "🎬", "🎤",
    "🎵", "🎹", "🎻", "🎺", "🎷", "🎸", "👾", "🎮", "🃏", "🎲", "🎯", "🏈", "🏀",
    "⚽", "🎾", "🎱", "🏉", "🎳", "⛳", "🚴", "🏁", "🏇", "🏆", "🎿", "🏂", "🏄",
    "🎣", "🍵", "🍶", "🍼", "🍺", "🍻", "🍸", "🍹", "🍷", "🍴", "🍕", "🍔", "🍟",
    "🍗", "🍤", "🍞", "🍩", "🍮", "🍦", "🍨", "🍧", "🎂", "🍰", "🍪", "🍫", "🍬",
    "🍭", "🍯", "🍎", "🍏", "🍊", "🍋", "🍒", "🍇", "🍉", "🍓", "🍑", "🍌", "🍐",
    "🍍", "🍆", "🍅", "🌽", "🏠", "🏡", "⛵", "🚤", "🚣", "🚀", "🚁", "🚂", "🚎",
    "🚌", "🚍", "🚙", "🚘", "🚗", "🚕", "🚖", "🚛", "🚚", "🚨", "🚓", "🚔", "🚒",
    "🚑", "🚐", "🚲", "🚜", "💈", "🚦", "🚧", "🏮", "🎰", "🗿", "🎪", "🎭", "📍",
    "🚩", "💯",
)
# fmt: on
