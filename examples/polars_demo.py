# %% [markdown]
# # fuzzt Polars Integration Demo
#
# | Level | API | Input | Use Case |
# |-------|-----|-------|----------|
# | Core | `fuzzt.*` | 2 strings | Single comparison |
# | Series | `fuzzt.batch_similarity` | 2 aligned pl.Series | Row-wise scores |
# | Series | `fuzzt.match_series` | pl.Series + choices | Top-N per query |
# | Expression | `.fuzzt.*` | pl.Expr | select, filter, with_columns |

# %%
import polars as pl

import fuzzt

# %% [markdown]
# ## Row-wise scores

# %%
pairs = pl.DataFrame(
    {
        "left": ["kitten", "martha", "dixon", None],
        "right": ["sitting", "marhta", "dicksonx", "anything"],
    }
)
print(
    pairs.with_columns(
        lev=fuzzt.batch_similarity(pairs["left"], pairs["right"]),
        jw=fuzzt.batch_similarity(pairs["left"], pairs["right"], fuzzt.Algorithm.JARO_WINKLER),
        osa=fuzzt.batch_similarity(pairs["left"], pairs["right"], "osa"),
    )
)

# %% [markdown]
# ## Top-N matches for a column of queries

# %%
countries = ["Brazil", "Argentina", "Germany", "France", "Spain", "Portugal"]
queries = pl.Series("typed", ["brazl", "Frnace", "SPAIN!", "xyz"])

print(fuzzt.match_series(queries, countries, cutoff=0.5, n=2, processor="lower_alphanum"))

# %% [markdown]
# ## Expression namespace
#
# Importing fuzzt registers `.fuzzt` on every expression.

# %%
people = pl.DataFrame({"name": ["John", "Jon", "Jane", "Johnny"]})
print(
    people.with_columns(
        score=pl.col("name").fuzzt.similarity("John", algorithm="jaro_winkler"),
        close=pl.col("name").fuzzt.is_similar("John", min_similarity=0.7),
    )
)
print(people.filter(pl.col("name").fuzzt.is_similar("John", min_similarity=0.85, algorithm="jaro_winkler")))
