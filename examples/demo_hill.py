"""
hill97 — Live Demo
==================
Run:  python examples/demo_hill.py

Encrypts and decrypts with a 2×2 and a 5×5 key, shows the derived
inverse keys, and rejects a singular key.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hill97 import HillCipher, Matrix, NotInvertible, is_valid_key, pad

LINE = "═" * 70


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def make_key(size, upper, lower):
    return [[upper(i, j) if i < j else lower(i, j) for j in range(size)]
            for i in range(size)]


KEY_2 = make_key(2, lambda i, j: 2 * i - 3 * j, lambda i, j: 5 * i + j)
KEY_5 = make_key(5, lambda i, j: 5 * i - 2 * j, lambda i, j: 3 * i + j)

print(f"\n{LINE}")
print("  hill97 — Hill Cipher modulo 97")
print(LINE)

for size, key, msg in ((2, KEY_2, "Hill Cipher!"), (5, KEY_5, "Hello, world!")):
    header(f"{size}×{size} key")
    t0 = time.perf_counter()
    hc = HillCipher(key)
    ct = hc.encrypt(msg)
    pt = hc.decrypt(ct)
    elapsed = time.perf_counter() - t0
    ok("Key",          hc.key.to_lists())
    ok("Inverse key",  hc.decryption_key.to_lists())
    ok("K × K⁻¹ = I",  str(hc.key * hc.decryption_key == Matrix.identity(size)))
    ok("Plaintext",    repr(msg))
    ok("Ciphertext",   repr(ct))
    ok("Decrypted",    repr(pt))
    ok("Padded match", str(pt == pad(msg, size)))
    ok("Round-trip",   f"{elapsed*1000:.2f} ms")

header("Singular key")
singular = [[1, 2, 3], [1, 2, 3], [4, 5, 6]]
ok("is_valid_key", str(is_valid_key(singular)))
try:
    HillCipher(singular)
except NotInvertible as e:
    ok("Rejected", str(e))

print(f"\n{LINE}\n")
