"""
Sequential bucket and proof identifier allocation.
"""
from ..values import Bucket, Proof


class SequentialIdAllocator:
    """
    Hands out ``bucket0, bucket1, ...`` and ``proof0, proof1, ...``.

    The two counters are independent and belong to this instance only.
    """

    def __init__(self):
        self._bucket_id = 0
        self._proof_id = 0

    def new_bucket(self) -> Bucket:
        bucket = Bucket(identifier=f"bucket{self._bucket_id}")
        self._bucket_id += 1
        return bucket

    def new_proof(self) -> Proof:
        proof = Proof(identifier=f"proof{self._proof_id}")
        self._proof_id += 1
        return proof
