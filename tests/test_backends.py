import hashlib
import importlib
import importlib.util
import os
import random
import unittest
from unittest import mock

import MD4
import MD4.Provider as cp
import MD4.Hashes as hashes
from MD4 import Session, SessionStatus
from MD4 import AlreadyFinalized, BackendInitFailure, DigestErrorType

from .reference import reference_md4

PYCRYPTODOMEX_AVAIL = importlib.util.find_spec("Cryptodome") != None
if PYCRYPTODOMEX_AVAIL:
    from MD4.Proxies import MD4SessionProxy

HASHLIB_AVAIL = True
try:
    hashlib.new("md4")
except ValueError:
    HASHLIB_AVAIL = False


class TestProvider(unittest.TestCase):

    def test_backend_is_selected(self):
        self.assertIn(cp.PROVIDER, [cp.PROVIDER_INTERNAL, cp.PROVIDER_PYCRYPTODOMEX])
        if cp.PROVIDER == cp.PROVIDER_INTERNAL:
            self.assertEqual(MD4.backend(), "internal")
            self.assertIsInstance(MD4.new(), Session)
        else:
            self.assertTrue(MD4.backend().startswith("pycryptodomex "))
            self.assertIsInstance(MD4.new(), MD4SessionProxy)

    def test_new_with_data(self):
        self.assertEqual(MD4.new(b"abc").final(), bytes.fromhex("a448017aaf21d8525fc10ae87aa6729d"))

    # Only runs where the local OpenSSL still provides MD4
    @unittest.skipIf(not HASHLIB_AVAIL, "hashlib does not support md4")
    def test_internal_against_hashlib(self):
        for idx in range(20):
            data = os.urandom(random.randint(idx*10, (idx*10)+1024))
            self.assertEqual(Session(data).final(), hashlib.new("md4", data).digest())


class TestProviderSelection(unittest.TestCase):
    def reload_provider(self):
        importlib.reload(cp)
        importlib.reload(hashes)

    def tearDown(self):
        self.reload_provider()

    def assert_internal(self):
        self.assertEqual(cp.PROVIDER, cp.PROVIDER_INTERNAL)
        self.assertEqual(MD4.backend(), "internal")
        self.assertIs(hashes.ext_md4, Session)
        self.assertIsInstance(MD4.new(), Session)
        self.assertEqual(MD4.md4(b"abc"), bytes.fromhex("a448017aaf21d8525fc10ae87aa6729d"))

    def test_falls_back_without_library(self):
        with mock.patch("importlib.util.find_spec", return_value=None):
            self.reload_provider()
        self.assert_internal()

    @unittest.skipIf(not PYCRYPTODOMEX_AVAIL, "pycryptodomex is not installed")
    def test_selects_library(self):
        self.reload_provider()
        self.assertEqual(cp.PROVIDER, cp.PROVIDER_PYCRYPTODOMEX)
        self.assertTrue(MD4.backend().startswith("pycryptodomex "))
        self.assertIs(hashes.ext_md4, MD4SessionProxy)
        self.assertIsInstance(MD4.new(), MD4SessionProxy)

    @unittest.skipIf(not PYCRYPTODOMEX_AVAIL, "pycryptodomex is not installed")
    def test_falls_back_on_old_library(self):
        import Cryptodome
        for version in ["3.8.2", "2.9.0"]:
            with mock.patch.object(Cryptodome, "__version__", version):
                self.reload_provider()
            self.assert_internal()
            self.assertEqual(cp.pycryptodomex_v, version)

    @unittest.skipIf(not PYCRYPTODOMEX_AVAIL, "pycryptodomex is not installed")
    def test_falls_back_when_context_fails(self):
        with mock.patch("Cryptodome.Hash.MD4.new", side_effect=ValueError("Error 1 while instantiating MD4")):
            self.reload_provider()
        self.assert_internal()

    def test_one_shot_releases_session(self):
        with mock.patch.object(hashes.ext_md4, "release", autospec=True, side_effect=hashes.ext_md4.release) as release:
            self.assertRaises(TypeError, MD4.md4, "abc")
            self.assertEqual(release.call_count, 1)
            MD4.md4(b"abc")
            self.assertEqual(release.call_count, 2)


@unittest.skipIf(not PYCRYPTODOMEX_AVAIL, "pycryptodomex is not installed")
class TestNativeBackend(unittest.TestCase):

    def test_vectors(self):
        self.assertEqual(MD4SessionProxy(b"").hexdigest(), "31d6cfe0d16ae931b73c59d7e0c089c0")
        self.assertEqual(MD4SessionProxy(b"a").hexdigest(), "bde52cb31de33e46245e05fbdbd6fb24")
        self.assertEqual(MD4SessionProxy(b"message digest").final(), bytes.fromhex("d9130a8164549fe818874806e1c7014b"))

    def test_backend_equivalence(self):
        lengths = [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000]
        lengths += [random.randint(0, 4096) for _ in range(30)]
        for length in lengths:
            data = os.urandom(length)
            native = MD4SessionProxy(data).final()
            internal = Session(data).final()
            self.assertEqual(native, internal, f"Backends disagree on {length} byte input")
            self.assertEqual(native, reference_md4(data))

    def test_streaming_equivalence(self):
        data = os.urandom(777)
        native = MD4SessionProxy()
        internal = Session()
        offset = 0
        while offset < len(data):
            chunk = random.randint(0, 100)
            native.update(data[offset:offset+chunk])
            internal.update(data[offset:offset+chunk])
            offset += chunk
        self.assertEqual(native.final(), internal.final())

    def test_final_releases_handle(self):
        session = MD4SessionProxy(b"abc")
        digest = session.final()
        self.assertIsNone(session.real)
        self.assertEqual(session.status, SessionStatus.FINALIZED)
        self.assertEqual(session.final(), digest)

    def test_update_after_final(self):
        session = MD4SessionProxy(b"abc")
        session.final()
        session.update(b"")
        with self.assertRaises(AlreadyFinalized) as context:
            session.update(b"d")
        self.assertEqual(context.exception.type, DigestErrorType.DE_ALREADY_FINALIZED)

    def test_digest_and_copy(self):
        session = MD4SessionProxy(b"message ")
        clone = session.copy()
        self.assertEqual(session.digest(), reference_md4(b"message "))
        self.assertEqual(session.status, SessionStatus.ACTIVE)
        clone.update(b"digest")
        self.assertEqual(clone.hexdigest(), "d9130a8164549fe818874806e1c7014b")
        self.assertEqual(session.final(), reference_md4(b"message "))
        self.assertEqual(session.copy().final(), session.final())

    def test_release(self):
        with MD4SessionProxy() as session:
            session.update(b"abc")
        self.assertIsNone(session.real)
        self.assertRaises(AlreadyFinalized, session.final)
        self.assertRaises(AlreadyFinalized, session.update, b"abc")

    def test_init_failure(self):
        with mock.patch("MD4.Proxies.pycryptodome_md4.new", side_effect=ValueError("Error 1 while instantiating MD4")):
            with self.assertRaises(BackendInitFailure) as context:
                MD4SessionProxy()
        self.assertEqual(context.exception.type, DigestErrorType.DE_BACKEND_INIT)
        self.assertIsInstance(context.exception.__cause__, ValueError)

    def test_bad_initial_data_releases_handle(self):
        with mock.patch.object(MD4SessionProxy, "release", autospec=True, side_effect=MD4SessionProxy.release) as release:
            self.assertRaises(TypeError, MD4SessionProxy, "abc")
        self.assertEqual(release.call_count, 1)


if __name__ == '__main__':
    unittest.main(verbosity=2)
