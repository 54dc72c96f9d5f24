# %% [markdown]
# # fuzzt Quickstart
#
# String similarity metrics and top-N fuzzy matching in a few lines.
#
# | Part | Topic |
# |------|-------|
# | 1 | Distances: Hamming, Levenshtein, OSA, Damerau-Levenshtein |
# | 2 | Ratios: Jaro, Jaro-Winkler, Sorensen-Dice, gestalt |
# | 3 | Beyond strings: the generic variants |
# | 4 | Picking the best matches |

# %%
import logging
import os

import fuzzt
from fuzzt import Algorithm, LowerAlphaNumStringProcessor, Similarity

# fuzzt logs ranking decisions at DEBUG level
logging.basicConfig(level=logging.DEBUG)

# %% [markdown]
# ## Part 1: Distances
#
# A distance counts edits, so 0 means equal.

# %%
print("hamming             ", fuzzt.hamming("hamming", "hammers"))
print("levenshtein         ", fuzzt.levenshtein("kitten", "sitting"))
print("osa_distance        ", fuzzt.osa_distance("ca", "abc"))
print("damerau_levenshtein ", fuzzt.damerau_levenshtein("ca", "abc"))

# Hamming only works on equal lengths
try:
    fuzzt.hamming("hamming", "ham")
except fuzzt.LengthMismatchError as e:
    print("hamming error:      ", e)

# %% [markdown]
# ## Part 2: Ratios
#
# A ratio lies in [0, 1], so 1.0 means equal.

# %%
pairs = [("dixon", "dicksonx"), ("martha", "marhta"), ("cheeseburger", "cheese fries")]
for a, b in pairs:
    print(
        f"{a:>14} vs {b:<14}"
        f" jaro={fuzzt.jaro(a, b):.3f}"
        f" jaro_winkler={fuzzt.jaro_winkler(a, b):.3f}"
        f" dice={fuzzt.sorensen_dice(a, b):.3f}"
        f" gestalt={fuzzt.sequence_matcher(a, b):.3f}"
        f" lev={fuzzt.normalized_levenshtein(a, b):.3f}"
    )

# %% [markdown]
# ## Part 3: Beyond strings
#
# The `generic_*` functions take any sequences, for example word tokens.

# %%
a = "the quick brown fox".split()
b = "quick the brown dog".split()
print("generic_levenshtein        ", fuzzt.generic_levenshtein(a, b))
print("generic_damerau_levenshtein", fuzzt.generic_damerau_levenshtein(a, b))
print("generic_jaro               ", round(fuzzt.generic_jaro(a, b), 3))

# %% [markdown]
# ## Part 4: Best matches
#
# `get_top_n` scores every choice, keeps those at or above `cutoff`, and
# returns the best `n`. Ties go to the alphabetically smaller choice.

# %%
choices = ["trazil", "BRA ZIL", "brazil", "spain", "braziu"]

print(fuzzt.get_top_n("brazil", choices))
print(fuzzt.get_top_n("brazil", choices, cutoff=0.9, n=5))
print(fuzzt.get_top_n("brazil", choices, n=2, scorer=Algorithm.JARO_WINKLER))
print(fuzzt.get_top_n("brazil", choices, n=2, processor=LowerAlphaNumStringProcessor()))

# Scores and positions
for match in fuzzt.extract("brazil", choices):
    print(f"  {match.text:<8} score={match.score:.3f} id={match.id}")


# %%
# Any object with compute(a, b) -> Similarity can be a scorer
class SharedPrefix:
    def compute(self, a, b):
        return Similarity.ratio(len(os.path.commonprefix([a, b])) / max(len(a), len(b), 1))


print(fuzzt.extract_one("brazil", choices, scorer=SharedPrefix()))
