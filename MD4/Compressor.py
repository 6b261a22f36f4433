# Reticulum License
#
# Copyright (c) 2016-2025 Mark Qvist
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# - The Software shall not be used in any kind of system which includes amongst
#   its functions the ability to purposefully do harm to human beings.
#
# - The Software shall not be used, directly or indirectly, in the creation of
#   an artificial intelligence, machine learning or language model training
#   dataset, including but not limited to any use that contributes to the
#   training or development of such a model or algorithm.
#
# - The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import struct

WORD_MASK  = 0xFFFFFFFF
BLOCK_SIZE = 64 # Bytes

INITIAL_STATE = (0x67452301, 0xefcdab89, 0x98badcfe, 0x10325476)

"""
The MD4 block function, as described in RFC 1320. Each of the
three rounds runs sixteen steps over the block words, and is
described by its mixing function, additive constant, the order
in which block words are consumed and the shift schedule that
cycles every four steps.
"""

def _f(x, y, z):
    return (x & y) | (~x & z)

def _g(x, y, z):
    return (x & y) | (x & z) | (y & z)

def _h(x, y, z):
    return x ^ y ^ z

ROUNDS = (
    # mix  constant    word order                                           shifts
    (_f,   0x00000000, (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15), (3, 7, 11, 19)),
    (_g,   0x5A827999, (0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15), (3, 5,  9, 13)),
    (_h,   0x6ED9EBA1, (0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15), (3, 9, 11, 15)),
)

def rotl(x, s):
    x &= WORD_MASK
    return ((x << s) | (x >> (32-s))) & WORD_MASK

def compress(state, block):
    """
    Runs one 64-byte block through the MD4 rounds.

    :param state: The current 4-word state as a tuple of (A, B, C, D).
    :param block: Exactly 64 bytes of input.
    :returns: The next 4-word state as a tuple.
    """
    assert len(block) == BLOCK_SIZE, "MD4 compression called with a "+str(len(block))+" byte block"

    x = struct.unpack("<16L", block)
    w = list(state)

    for mix, constant, order, shifts in ROUNDS:
        for step in range(16):
            # The target word steps backwards through A, D, C, B
            a = (16-step) % 4
            b = (a+1) % 4
            c = (a+2) % 4
            d = (a+3) % 4
            w[a] = rotl(w[a] + mix(w[b], w[c], w[d]) + x[order[step]] + constant, shifts[step%4])

    return tuple((s + v) & WORD_MASK for s, v in zip(state, w))
