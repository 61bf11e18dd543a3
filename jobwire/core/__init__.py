"""jobwire core: error records, wire codec and ambient services."""
