"""printf-style formatting with flags, width, precision and levelled logging."""