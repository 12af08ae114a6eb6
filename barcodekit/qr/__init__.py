"""QR code encoding: data modes, version tables, blocks, patterns and rendering."""