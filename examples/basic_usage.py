from __future__ import annotations

import logging

from jsonrescue import ExtractorConfig, JsonExtractor

COMPLETION = """
Sure! Here are two knowledge cards based on your text:

```json
[
  {"Q": "What is a closure?", "A": "A function that captures variables from its enclosing scope."},
  {"Q": "What is a generator?", "A": "A function that yields values lazily."}  // second card
]
```

Let me know if you would like more.
"""


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    extractor = JsonExtractor(ExtractorConfig(max_input_chars=100_000))
    outcome = extractor.locate(COMPLETION)
    if outcome is None:
        print("No cards found in the completion.")
        return

    # shape checks are the caller's job
    print(f"recovered via {outcome.strategy.value}")
    for card in outcome.value:
        print(f"Q: {card['Q']}")
        print(f"A: {card['A']}")


if __name__ == "__main__":
    main()
