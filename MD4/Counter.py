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

class BitCounter:
    """
    Running count of message bits, kept as the 8 little-endian bytes
    that end up in the length field of the final MD4 block.

    Streams longer than 2^64 bits wrap the counter around, exactly as
    the length field itself does. Such streams are not expected in
    practice, but the digest of one will not match a correct MD4.
    """
    SIZE = 8 # Bytes

    def __init__(self):
        self._count = bytearray(BitCounter.SIZE)

    def add(self, byte_count):
        if byte_count < 0:
            raise ValueError("Cannot count a negative number of bytes")

        carry = byte_count*8
        for i in range(BitCounter.SIZE):
            if not carry:
                break
            carry += self._count[i]
            self._count[i] = carry & 0xFF
            carry >>= 8

    @property
    def value(self):
        return int.from_bytes(self._count, "little")

    def to_bytes(self):
        return bytes(self._count)

    def copy(self):
        counter = BitCounter()
        counter._count[:] = self._count
        return counter

    def __repr__(self):
        return "<BitCounter "+str(self.value)+" bits>"
