# ABOUTME: Canned Ollama API response fixtures for testing the vision client.
# ABOUTME: Covers model listings and generate replies in clean and messy shapes.

TAGS_RESPONSE = {
    "models": [
        {"name": "llava:13b", "size": 8000000000, "digest": "abc", "modified_at": "2024-05-01"},
        {"name": "llama3:8b", "size": 4700000000, "digest": "def", "modified_at": "2024-05-01"},
        {"name": "qwen2.5vl:7b", "size": 6000000000, "digest": "ghi", "modified_at": "2024-05-01"},
        {"name": "mistral:7b", "size": 4100000000, "digest": "jkl", "modified_at": "2024-05-01"},
    ]
}

GENERATE_RESPONSE_CLEAN = {
    "model": "llava:13b",
    "response": (
        '{"title": "1984", "author": "George Orwell", '
        '"isbn": "978-0-451-52493-5", "publisher": "Signet Classic"}'
    ),
    "done": True,
}

GENERATE_RESPONSE_WRAPPED = {
    "model": "llava:13b",
    "response": (
        "Sure! Here is what I can read from the cover:\n"
        "```json\n"
        '{\n  "title": "The Name of the Rose",\n  "author": "Umberto Eco"\n}\n'
        "```\n"
    ),
    "done": True,
}

GENERATE_RESPONSE_GARBAGE = {
    "model": "llava:13b",
    "response": "I could not read any text on this book, sorry.",
    "done": True,
}
