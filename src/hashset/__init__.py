from hashset.env import ENV_HASHSET_SORTED_STR, HashSetEnv, env
from hashset.errors import HashSetError, NotAHashSetError, UnhashableElementError
from hashset.hashset import HashSet, new

__all__ = [
	# Container
	"HashSet",
	"new",
	# Errors
	"HashSetError",
	"NotAHashSetError",
	"UnhashableElementError",
	# Configuration
	"ENV_HASHSET_SORTED_STR",
	"HashSetEnv",
	"env",
]
