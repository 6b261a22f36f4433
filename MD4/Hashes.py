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

import MD4
import MD4.Provider as cp

if cp.PROVIDER == cp.PROVIDER_PYCRYPTODOMEX:
    from MD4.Proxies import MD4SessionProxy as ext_md4
else:
    from MD4.Session import Session as ext_md4

"""
The session class is bound once, when this module is first
imported, according to the provider selected in MD4.Provider.
All MD4 sessions created through the package end up here.
"""

def new(data=None):
    """
    Creates a new MD4 digest session on the selected backend.

    :param data: Optional initial data as *bytes*.
    :returns: A session supporting ``update``, ``final``, ``digest`` and ``hexdigest``.
    :raises: *BackendInitFailure* if the native backend could not create its context.
    """
    return ext_md4(data)

def md4(data):
    with ext_md4() as digest:
        digest.update(data)
        return digest.final()

def hexdigest(data):
    return MD4.hexrep(md4(data), delimit=False)
