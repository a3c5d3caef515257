# Components package initialization
