#!/usr/bin/env python3

"""
Instruction Set

Each decoded opcode becomes an Instruction: a kind (the opcode pattern, such as
"8xy4"), its operands, and references to the machine state and peripherals it
acts upon.  Executing it looks the kind up in OPERATIONS and runs the matching
handler, which applies a single atomic change to the state.

The program counter has already been moved on to the next instruction by the
time any handler runs, so skips add another 2 and jumps simply overwrite it.

Operand names follow the usual convention:
    x/y = register (0-15)
    n   = nibble
    kk  = byte
    nnn = address
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import BYTE_MASK, WORD_MASK, MEM_MASK, FLAG_REGISTER, GLYPH_LOC, GLYPH_HEIGHT

IDLE = "IDLE"


class Instruction:
    def __init__(self, kind, state, peripherals, x=0, y=0, n=0, kk=0, nnn=0):
        self.kind = kind
        self.state = state
        self.peripherals = peripherals
        self.x = x
        self.y = y
        self.n = n
        self.kk = kk
        self.nnn = nnn
        self.handler, self.template = OPERATIONS[kind]

    def execute(self):
        self.handler(self)

    def __str__(self):
        return self.template.format(x=self.x, y=self.y, n=self.n, kk=self.kk, nnn=self.nnn)

    def __repr__(self):
        return "<Instruction {} '{}'>".format(self.kind, self)


def _skip(ins):
    ins.state.ip = (ins.state.ip + 2) & WORD_MASK


def _idle(ins):  # pylint: disable=unused-argument
    pass


def _00E0(ins):  # CLS
    ins.state.screen.clear()


def _00EE(ins):  # RET
    ins.state.ip = ins.state.stack.pop()


def _1nnn(ins):  # JP addr
    ins.state.ip = ins.nnn


def _2nnn(ins):  # CALL addr
    state = ins.state
    state.stack.push(state.ip)
    state.ip = ins.nnn


def _3xkk(ins):  # SE Vx, byte
    if ins.state.v[ins.x] == ins.kk:
        _skip(ins)


def _4xkk(ins):  # SNE Vx, byte
    if ins.state.v[ins.x] != ins.kk:
        _skip(ins)


def _5xy0(ins):  # SE Vx, Vy
    v = ins.state.v

    if v[ins.x] == v[ins.y]:
        _skip(ins)


def _6xkk(ins):  # LD Vx, byte
    ins.state.v[ins.x] = ins.kk


def _7xkk(ins):  # ADD Vx, byte
    # Carry is discarded, and Vf is left alone
    v = ins.state.v
    v[ins.x] = (v[ins.x] + ins.kk) & BYTE_MASK


def _8xy0(ins):  # LD Vx, Vy
    v = ins.state.v
    v[ins.x] = v[ins.y]


def _8xy1(ins):  # OR Vx, Vy
    v = ins.state.v
    v[ins.x] |= v[ins.y]


def _8xy2(ins):  # AND Vx, Vy
    v = ins.state.v
    v[ins.x] &= v[ins.y]


def _8xy3(ins):  # XOR Vx, Vy
    v = ins.state.v
    v[ins.x] ^= v[ins.y]


# In the flag-setting instructions below, Vf is written AFTER Vx, as sometimes Vf is specified in the parameters and
# the flag has to win.

def _8xy4(ins):  # ADD Vx, Vy
    v = ins.state.v
    val = v[ins.x] + v[ins.y]
    v[ins.x] = val & BYTE_MASK
    v[FLAG_REGISTER] = int(val > BYTE_MASK)  # Vf is set when carrying


def _8xy5(ins):  # SUB Vx, Vy
    v = ins.state.v
    vx = v[ins.x]
    vy = v[ins.y]
    v[ins.x] = (vx - vy) & BYTE_MASK
    v[FLAG_REGISTER] = int(vx >= vy)  # Vf is set when NOT borrowing


def _8xy6(ins):  # SHR Vx
    v = ins.state.v
    val = v[ins.x]
    v[ins.x] = val >> 1
    v[FLAG_REGISTER] = val & 1  # The bit shifted out


def _8xy7(ins):  # SUBN Vx, Vy
    v = ins.state.v
    vx = v[ins.x]
    vy = v[ins.y]
    v[ins.x] = (vy - vx) & BYTE_MASK
    v[FLAG_REGISTER] = int(vy >= vx)


def _8xyE(ins):  # SHL Vx
    v = ins.state.v
    val = v[ins.x]
    v[ins.x] = (val << 1) & BYTE_MASK
    v[FLAG_REGISTER] = (val >> 7) & 1


def _9xy0(ins):  # SNE Vx, Vy
    v = ins.state.v

    if v[ins.x] != v[ins.y]:
        _skip(ins)


def _Annn(ins):  # LD I, addr
    ins.state.i = ins.nnn


def _Bnnn(ins):  # JP V0, addr
    state = ins.state
    state.ip = (state.v[0] + ins.nnn) & WORD_MASK


def _Cxkk(ins):  # RND Vx, byte
    # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
    ins.state.v[ins.x] = ins.peripherals.random_byte() & ins.kk


def _Dxyn(ins):  # DRW Vx, Vy, nibble
    # Sprites are always 8 pixels wide and n rows high, one byte per row, with the most significant bit on the left.
    # Every pixel wraps around the screen edges, not just the sprite's origin.
    state = ins.state
    v = state.v
    memory = state.memory
    screen = state.screen
    vid_width, vid_height = screen.get_vid_size()
    vx_pos = v[ins.x] % vid_width
    vy_pos = v[ins.y] % vid_height
    i = state.i
    collided = False

    for y in range(ins.n):
        spr_data = memory.read((i + y) & MEM_MASK)

        for x in range(8):
            # Don't stop drawing on a collision.  Set the flag, and never unset it for this sprite.
            if spr_data & (0x80 >> x) and screen.xor_pixel(vx_pos + x, vy_pos + y):
                collided = True

    v[FLAG_REGISTER] = int(collided)
    ins.peripherals.renderer.request_redraw()


def _Ex9E(ins):  # SKP Vx
    if ins.peripherals.inputs.is_key_down(ins.state.v[ins.x] & 0xF):
        _skip(ins)


def _ExA1(ins):  # SKNP Vx
    if not ins.peripherals.inputs.is_key_down(ins.state.v[ins.x] & 0xF):
        _skip(ins)


def _Fx07(ins):  # LD Vx, DT
    ins.state.v[ins.x] = ins.state.delay


def _Fx0A(ins):  # LD Vx, K
    # This opcode waits for a keypress, but timers still need to run and the host still needs control, so rather than
    # block, wind the program counter back and come here again on the next cycle.
    # Any key already held is accepted.  There is no wait for a fresh press, so a held key is read again next time.
    state = ins.state
    key = ins.peripherals.inputs.get_pressed_key()

    if key is None:
        state.ip = (state.ip - 2) & WORD_MASK
    else:
        state.v[ins.x] = key


def _Fx15(ins):  # LD DT, Vx
    ins.state.delay = ins.state.v[ins.x]


def _Fx18(ins):  # LD ST, Vx
    ins.state.sound = ins.state.v[ins.x]


def _Fx1E(ins):  # ADD I, Vx
    state = ins.state
    state.i = (state.i + state.v[ins.x]) & WORD_MASK


def _Fx29(ins):  # LD F, Vx
    state = ins.state
    state.i = GLYPH_LOC + GLYPH_HEIGHT * (state.v[ins.x] & 0xF)


def _Fx33(ins):  # LD B, Vx
    state = ins.state
    memory = state.memory
    val = state.v[ins.x]
    i = state.i
    memory.write(i & MEM_MASK, val // 100)               # Most-significant digit
    memory.write((i + 1) & MEM_MASK, (val // 10) % 10)   # Middle digit
    memory.write((i + 2) & MEM_MASK, val % 10)           # Least-significant digit


def _Fx55(ins):  # LD [I], Vx
    # I is left unchanged afterwards
    state = ins.state
    i = state.i

    for reg in range(ins.x + 1):
        state.memory.write((i + reg) & MEM_MASK, state.v[reg])


def _Fx65(ins):  # LD Vx, [I]
    state = ins.state
    i = state.i

    for reg in range(ins.x + 1):
        state.v[reg] = state.memory.read((i + reg) & MEM_MASK)


# Kind -> (handler, trace template)
OPERATIONS = {
    IDLE:   (_idle, "IDLE"),
    "00E0": (_00E0, "CLS"),
    "00EE": (_00EE, "RET"),
    "1nnn": (_1nnn, "JP 0x{nnn:03x}"),
    "2nnn": (_2nnn, "CALL 0x{nnn:03x}"),
    "3xkk": (_3xkk, "SE V{x:01x}, 0x{kk:02x}"),
    "4xkk": (_4xkk, "SNE V{x:01x}, 0x{kk:02x}"),
    "5xy0": (_5xy0, "SE V{x:01x}, V{y:01x}"),
    "6xkk": (_6xkk, "LD V{x:01x}, 0x{kk:02x}"),
    "7xkk": (_7xkk, "ADD V{x:01x}, 0x{kk:02x}"),
    "8xy0": (_8xy0, "LD V{x:01x}, V{y:01x}"),
    "8xy1": (_8xy1, "OR V{x:01x}, V{y:01x}"),
    "8xy2": (_8xy2, "AND V{x:01x}, V{y:01x}"),
    "8xy3": (_8xy3, "XOR V{x:01x}, V{y:01x}"),
    "8xy4": (_8xy4, "ADD V{x:01x}, V{y:01x}"),
    "8xy5": (_8xy5, "SUB V{x:01x}, V{y:01x}"),
    "8xy6": (_8xy6, "SHR V{x:01x}"),
    "8xy7": (_8xy7, "SUBN V{x:01x}, V{y:01x}"),
    "8xyE": (_8xyE, "SHL V{x:01x}"),
    "9xy0": (_9xy0, "SNE V{x:01x}, V{y:01x}"),
    "Annn": (_Annn, "LD I, 0x{nnn:03x}"),
    "Bnnn": (_Bnnn, "JP V0, 0x{nnn:03x}"),
    "Cxkk": (_Cxkk, "RND V{x:01x}, 0x{kk:02x}"),
    "Dxyn": (_Dxyn, "DRW V{x:01x}, V{y:01x}, 0x{n:01x}"),
    "Ex9E": (_Ex9E, "SKP V{x:01x}"),
    "ExA1": (_ExA1, "SKNP V{x:01x}"),
    "Fx07": (_Fx07, "LD V{x:01x}, DT"),
    "Fx0A": (_Fx0A, "LD V{x:01x}, K"),
    "Fx15": (_Fx15, "LD DT, V{x:01x}"),
    "Fx18": (_Fx18, "LD ST, V{x:01x}"),
    "Fx1E": (_Fx1E, "ADD I, V{x:01x}"),
    "Fx29": (_Fx29, "LD F, V{x:01x}"),
    "Fx33": (_Fx33, "LD B, V{x:01x}"),
    "Fx55": (_Fx55, "LD [I], V{x:01x}"),
    "Fx65": (_Fx65, "LD V{x:01x}, [I]")
}
