"""Small helpers for characters, numbers, memory, strings and linked lists."""