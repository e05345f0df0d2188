"""Daily check-in words, one per lecture, cycled when the term outruns the table."""

PASSWORDS: tuple[str, ...] = (
    "apple", "banana", "cherry", "date", "elderberry",
    "fig", "grape", "honeydew", "kiwi", "lemon",
    "mango", "nectarine", "orange", "peach", "quince",
    "raspberry", "strawberry", "tangerine", "watermelon", "avocado",
    "blueberry", "cantaloupe", "dragonfruit", "elderflower", "guava",
    "jackfruit", "kumquat", "lychee", "mulberry", "papaya",
    "pineapple", "plum", "pomegranate", "soursop", "tomato",
    "ugli", "vanilla", "wolfberry", "xigua", "yellowpassion",
    "zucchini", "acai", "blackberry", "cranberry", "durian",
    "feijoa", "gooseberry", "huckleberry", "ilama", "jambul",
)
