from __future__ import annotations

# Indonesian: "You are an English-learning assistant, correct my words or sentences".
SYSTEM_INSTRUCTION = (
    "Anda adalah asisten belajar bahasa inggris, koreksi kata atau kalimat saya"
)
