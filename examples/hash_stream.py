#!/usr/bin/env python3
"""Streaming BLAKE-256 example.

Shows incremental hashing, reading digests mid-stream, salting and
checkpointing a computation.
"""

import json
import sys
from pathlib import Path

# Add the parent directory to the path so we can import blake256
sys.path.insert(0, str(Path(__file__).parent.parent))

from blake256.config import HashConfig
from blake256.crypto import (
    Blake224,
    Blake256,
    deserialize_digest_state,
    random_salt,
    serialize_digest_state,
)
from blake256.logs import init_logging


def main() -> None:
    init_logging()
    config = HashConfig.from_environment()
    problems = config.validate()
    if problems:
        for problem in problems:
            print(f"config error: {problem}", file=sys.stderr)
        sys.exit(1)

    print("1. One-shot digests")
    print(f"   BLAKE-256('') = {Blake256().hexdigest()}")
    print(f"   BLAKE-224('') = {Blake224().hexdigest()}")

    print("\n2. Incremental hashing with a digest read in the middle")
    h = config.new_hasher()
    h.update(b"The quick brown fox ")
    print(f"   after 20 bytes: {h.hexdigest()}")
    h.update(b"jumps over the lazy dog")
    print(f"   after 43 bytes: {h.hexdigest()}")

    print("\n3. Salted hashing")
    salt = random_salt()
    print(f"   salt {salt.hex()}: {Blake256(b'hello', salt=salt).hexdigest()}")

    print("\n4. Checkpoint and resume")
    blob = json.dumps(serialize_digest_state(h))
    resumed = deserialize_digest_state(json.loads(blob))
    print(f"   snapshot: {blob}")
    print(f"   resumed digest matches: {resumed.digest() == h.digest()}")


if __name__ == "__main__":
    main()
