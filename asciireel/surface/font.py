"""
Block font for large text: 5 rows x 5 columns per glyph, '#' = ink.
Characters missing from the table render as a space.
"""
GLYPH_WIDTH = 5
GLYPH_HEIGHT = 5
GLYPH_ADVANCE = 6  # glyph width + 1 column gap

BLOCK_FONT: dict[str, tuple[str, ...]] = {
    "A": ("  #  ", " # # ", "#####", "#   #", "#   #"),
    "B": ("#### ", "#   #", "#### ", "#   #", "#### "),
    "C": (" ### ", "#   #", "#    ", "#   #", " ### "),
    "D": ("#### ", "#   #", "#   #", "#   #", "#### "),
    "E": ("#####", "#    ", "#### ", "#    ", "#####"),
    "F": ("#####", "#    ", "#### ", "#    ", "#    "),
    "G": (" ### ", "#    ", "#  ##", "#   #", " ### "),
    "H": ("#   #", "#   #", "#####", "#   #", "#   #"),
    "I": ("#####", "  #  ", "  #  ", "  #  ", "#####"),
    "J": ("#####", "    #", "    #", "#   #", " ### "),
    "K": ("#   #", "#  # ", "###  ", "#  # ", "#   #"),
    "L": ("#    ", "#    ", "#    ", "#    ", "#####"),
    "M": ("#   #", "## ##", "# # #", "#   #", "#   #"),
    "N": ("#   #", "##  #", "# # #", "#  ##", "#   #"),
    "O": (" ### ", "#   #", "#   #", "#   #", " ### "),
    "P": ("#### ", "#   #", "#### ", "#    ", "#    "),
    "Q": (" ### ", "#   #", "#   #", "#  ##", " ####"),
    "R": ("#### ", "#   #", "#### ", "#  # ", "#   #"),
    "S": (" ####", "#    ", " ### ", "    #", "#### "),
    "T": ("#####", "  #  ", "  #  ", "  #  ", "  #  "),
    "U": ("#   #", "#   #", "#   #", "#   #", " ### "),
    "V": ("#   #", "#   #", "#   #", " # # ", "  #  "),
    "W": ("#   #", "#   #", "# # #", "## ##", "#   #"),
    "X": ("#   #", " # # ", "  #  ", " # # ", "#   #"),
    "Y": ("#   #", " # # ", "  #  ", "  #  ", "  #  "),
    "Z": ("#####", "   # ", "  #  ", " #   ", "#####"),
    "0": (" ### ", "#   #", "#   #", "#   #", " ### "),
    "1": ("  #  ", " ##  ", "  #  ", "  #  ", "#####"),
    "2": (" ### ", "#   #", "   # ", "  #  ", "#####"),
    "3": (" ### ", "#   #", "  ## ", "#   #", " ### "),
    "4": ("#   #", "#   #", "#####", "    #", "    #"),
    "5": ("#####", "#    ", "#### ", "    #", "#### "),
    "6": (" ### ", "#    ", "#### ", "#   #", " ### "),
    "7": ("#####", "    #", "   # ", "  #  ", "  #  "),
    "8": (" ### ", "#   #", " ### ", "#   #", " ### "),
    "9": (" ### ", "#   #", " ####", "    #", " ### "),
    " ": ("     ", "     ", "     ", "     ", "     "),
    "!": ("  #  ", "  #  ", "  #  ", "     ", "  #  "),
    "?": (" ### ", "#   #", "   # ", "     ", "  #  "),
    ".": ("     ", "     ", "     ", "     ", "  #  "),
    ",": ("     ", "     ", "     ", "  #  ", " #   "),
    ":": ("     ", "  #  ", "     ", "  #  ", "     "),
    "'": ("  #  ", "  #  ", "     ", "     ", "     "),
    "-": ("     ", "     ", "#####", "     ", "     "),
    "+": ("     ", "  #  ", "#####", "  #  ", "     "),
    "=": ("     ", "#####", "     ", "#####", "     "),
    "*": ("     ", "# # #", " ### ", "# # #", "     "),
    "/": ("    #", "   # ", "  #  ", " #   ", "#    "),
    "(": ("  ## ", " #   ", " #   ", " #   ", "  ## "),
    ")": ("##   ", "   # ", "   # ", "   # ", "##   "),
    "<": ("   # ", "  #  ", " #   ", "  #  ", "   # "),
    ">": (" #   ", "  #  ", "   # ", "  #  ", " #   "),
}

# Light → dark ramp for gradient fills and fades
DENSITY_CHARS: tuple[str, ...] = (" ", ".", ":", "-", "=", "+", "*", "#", "%", "@")


def glyph(char: str) -> tuple[str, ...]:
    return BLOCK_FONT.get(char.upper(), BLOCK_FONT[" "])


def large_text_width(text: str) -> int:
    return len(text) * GLYPH_ADVANCE
