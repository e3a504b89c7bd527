"""bcrypt password hashing."""

import bcrypt


class PasswordHashingService:
    """One-way password hashing with bcrypt.

    Each hash carries its own random salt, so hashing the same password
    twice gives two different strings that both verify.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> stored = hasher.hash("secret")
    >>> hasher.verify("secret", stored), hasher.verify("guess", stored)
    (True, False)
    """

    DEFAULT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the iteration count).
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password`` (``$2b$<rounds>$...``).

        Raises
        ------
        ValueError
            If bcrypt refuses the input, e.g. a password over 72 bytes on
            recent bcrypt releases.
        """
        digest = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """True if ``password`` matches ``password_hash``.

        A hash bcrypt cannot parse counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
        except (ValueError, TypeError):
            return False
