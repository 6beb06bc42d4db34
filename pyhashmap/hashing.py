HASH_MULTIPLIER = 31
HASH_MODULUS = 10**9 + 7


def hash_string(key: str) -> int:
    # whole code points, so characters above U+FFFF count once
    hash = 0
    for i in range(len(key)):
        hash = (HASH_MULTIPLIER * hash + ord(key[i])) % HASH_MODULUS
    return hash


def bucket_index(key: str, capacity: int) -> int:
    return hash_string(key) % capacity
