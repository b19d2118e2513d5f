"""Character, memory, string, linked-list, output and line-reading helpers."""