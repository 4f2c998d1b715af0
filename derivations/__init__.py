from .enumerator import LIMIT, DerivationEnumerator
