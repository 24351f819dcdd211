"""
classical_ciphers — Live Demo: Caesar, Vigenère, Playfair
=========================================================
Run:  python examples/demo_all_ciphers.py

Encodes and decodes one message with every cipher, printing the
intermediate results and the Playfair key square.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_ciphers.ciphers.caesar   import CaesarCipher
from classical_ciphers.ciphers.vigenere import VigenereCipher
from classical_ciphers.ciphers.playfair import PlayfairCipher, segment

LINE = "═" * 70
MSG  = "Hide the gold in the tree stump!"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classical_ciphers — Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("SHIFT — Caesar (offset 3)")
c  = CaesarCipher(3)
ct = c.encode(MSG)
ok("Encoded", ct)
ok("Decoded", c.decode(ct))

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header("RUNNING KEY — Vigenère (key LEMON)")
v  = VigenereCipher("LEMON")
ct = v.encode(MSG)
ok("Encoded", ct)
ok("Decoded", v.decode(ct))

# ── PLAYFAIR ─────────────────────────────────────────────────────────────────
header("DIGRAM GRID — Playfair (key 'playfair example')")
t0 = time.perf_counter()
p  = PlayfairCipher("playfair example")
print()
for row in str(p.grid).splitlines():
    print(f"      {row}")
print()
ok("Digrams", " ".join(a + b for a, b in segment(MSG)))
ct = p.encode(MSG)
pt = p.decode(ct)
elapsed = time.perf_counter() - t0
ok("Encoded",    ct)
ok("Decoded",    pt)
ok("Round-trip", f"{elapsed*1000:.2f} ms")

print(f"\n{LINE}\n")
