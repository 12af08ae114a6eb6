"""PDF417 codewords: high-level compaction, dimensions and error correction."""