"""Obfuscate sequential integer ids with SPECK-64/128.

Each id is packed into 8 little-endian bytes, which is exactly one
SPECK-64 block, so the mapping id -> encrypted id is a bijection on
64-bit integers and can always be reversed with the same key.
"""

import argparse

from speck import (
    Speck64_128,
    decrypt_words_tensor,
    encrypt_words_tensor,
    get_logger,
    tensor_to_words,
    words_to_tensor,
)


def encrypt_id(cipher: Speck64_128, id_: int) -> int:
    data = bytearray(id_.to_bytes(8, "little"))
    cipher.seal_in_place(data)
    return int.from_bytes(data, "little")


def decrypt_id(cipher: Speck64_128, id_: int) -> int:
    data = bytearray(id_.to_bytes(8, "little"))
    cipher.open_in_place(data)
    return int.from_bytes(data, "little")


def encrypt_ids_batch(cipher: Speck64_128, ids: list[int]) -> list[int]:
    """Same mapping as encrypt_id, vectorized over torch tensors.

    The low 32 bits of an id are word y and the high 32 bits are word x.
    """
    pairs = [[i & 0xFFFFFFFF, i >> 32] for i in ids]
    out = encrypt_words_tensor(cipher, words_to_tensor(pairs))
    return [y | (x << 32) for y, x in tensor_to_words(out, cipher.params)]


def decrypt_ids_batch(cipher: Speck64_128, ids: list[int]) -> list[int]:
    pairs = [[i & 0xFFFFFFFF, i >> 32] for i in ids]
    out = decrypt_words_tensor(cipher, words_to_tensor(pairs))
    return [y | (x << 32) for y, x in tensor_to_words(out, cipher.params)]


def main():
    parser = argparse.ArgumentParser(description="Encrypted id demo")
    parser.add_argument("--count", type=int, default=1000)
    args = parser.parse_args()

    logger = get_logger("encrypted_ids")
    cipher = Speck64_128([0, 1, 3, 4])

    ids = list(range(1, args.count + 1))
    for id_ in ids:
        encrypted = encrypt_id(cipher, id_)
        decrypted = decrypt_id(cipher, encrypted)
        print(f"{id_} -> {encrypted} -> {decrypted}")

    batch = encrypt_ids_batch(cipher, ids)
    if batch != [encrypt_id(cipher, i) for i in ids]:
        raise RuntimeError("batch and scalar id encryption disagree")
    if decrypt_ids_batch(cipher, batch) != ids:
        raise RuntimeError("batch id decryption did not restore the ids")
    logger.info(f"Batch path agrees with scalar path for {len(ids)} ids")


if __name__ == "__main__":
    main()
