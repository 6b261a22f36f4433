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

import copy
import enum

import MD4
from MD4.Compressor import compress, INITIAL_STATE, BLOCK_SIZE
from MD4.Counter import BitCounter
from MD4.Padding import final_blocks, serialize
from MD4.Exceptions import AlreadyFinalized

class SessionStatus(enum.IntEnum):
    ACTIVE    = 0x00
    FINALIZED = 0x01


def check_input(data, caller):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("%s() argument must be bytes-like, not %s" % (caller, type(data).__name__))
    return bytes(data)


class Session:
    """
    Self-contained MD4 digest session. Data is fed in with ``update``
    and the digest is retrieved once with ``final``, after which the
    session only answers with the cached digest.

    Sessions are not thread-safe. Use one session per stream, or
    serialise all calls against a shared one.

    :param data: Optional initial data as *bytes*.
    """
    name        = "md4"
    digest_size = 16
    block_size  = BLOCK_SIZE

    def __init__(self, data=None):
        self._state   = INITIAL_STATE
        self._counter = BitCounter()
        self._pending = b""
        self._digest  = None
        self.status   = SessionStatus.ACTIVE

        if data is not None:
            self.update(data)

    def update(self, data):
        """
        Feeds data into the session. Full 64-byte blocks are compressed
        right away, any remainder is buffered until more data arrives.

        :param data: Data as *bytes*. Empty data is always accepted.
        :raises: *AlreadyFinalized* if non-empty data is fed to a finalized session.
        """
        data = check_input(data, "update")

        if self.status == SessionStatus.FINALIZED:
            if len(data) == 0:
                return
            MD4.log("Rejected "+str(len(data))+" bytes fed to finalized "+str(self), MD4.LOG_DEBUG)
            raise AlreadyFinalized("Cannot update an MD4 session after it has been finalized")

        if len(data) == 0:
            return

        buffer = self._pending+data
        offset = 0
        while len(buffer)-offset >= BLOCK_SIZE:
            self._state = compress(self._state, buffer[offset:offset+BLOCK_SIZE])
            self._counter.add(BLOCK_SIZE)
            offset += BLOCK_SIZE

        self._pending = buffer[offset:]

    def final(self):
        """
        Pads and finishes the computation. Calling this again returns
        the same digest.

        :returns: The 16-byte MD4 digest as *bytes*.
        :raises: *AlreadyFinalized* if the session was released before it was finalized.
        """
        if self.status == SessionStatus.FINALIZED:
            if self._digest == None:
                raise AlreadyFinalized("Cannot finalize an MD4 session that was released")
            return self._digest

        self._counter.add(len(self._pending))
        for block in final_blocks(self._pending, self._counter):
            self._state = compress(self._state, block)

        self._digest  = serialize(self._state)
        self._pending = b""
        self.status   = SessionStatus.FINALIZED
        MD4.log("Finalized "+str(self)+" after "+str(self._counter.value)+" bits, digest is "+MD4.prettyhexrep(self._digest), MD4.LOG_EXTREME)

        return self._digest

    def digest(self):
        """
        :returns: The digest of the data fed so far, without finalizing the session.
        """
        if self.status == SessionStatus.FINALIZED:
            return self.final()
        else:
            return self.copy().final()

    def hexdigest(self):
        return self.digest().hex()

    def copy(self):
        return copy.deepcopy(self)

    def release(self):
        if self.status == SessionStatus.ACTIVE:
            self.status = SessionStatus.FINALIZED
        self._state   = None
        self._counter = None
        self._pending = b""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()

    def __str__(self):
        return "<internal MD4 session "+hex(id(self))+">"
