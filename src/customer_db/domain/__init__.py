"""Domain layer - customer records, field codecs and the record store."""
