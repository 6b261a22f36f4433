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

from .Compressor import BLOCK_SIZE

PAD_MARKER    = b"\x80"
LENGTH_OFFSET = BLOCK_SIZE-8

def final_blocks(pending, counter):
    """
    Builds the block or blocks that terminate an MD4 computation.

    The leftover bytes are followed by a single set bit and zero fill.
    When the leftover is 55 bytes or less, the 64-bit bit count fits
    at the end of the same block. Otherwise the first block is zero
    filled to its end and the count goes into an extra block.

    :param pending: The 0 to 63 bytes not yet consumed by a full block.
    :param counter: A *BitCounter* that already includes the pending bytes.
    :returns: A list of one or two 64-byte blocks.
    """
    assert len(pending) < BLOCK_SIZE, "Pending buffer holds a full block"

    block = bytes(pending)+PAD_MARKER
    if len(pending) < LENGTH_OFFSET:
        return [block+bytes(LENGTH_OFFSET-len(block))+counter.to_bytes()]
    else:
        return [block+bytes(BLOCK_SIZE-len(block)), bytes(LENGTH_OFFSET)+counter.to_bytes()]

def serialize(state):
    # A, B, C and D in order, low-order byte first
    return struct.pack("<4L", *state)
