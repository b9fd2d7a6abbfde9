"""Test suite for invoicetap.

Organized into three categories:

1. core/: Unit tests for the combinators, update variants and walkthrough
   - Uses in-memory fakes and unittest.mock doubles for ports

2. adapters/: Tests for the in-memory account directory

3. fakes/: Port implementations for testing
   - Recording fakes of AccountDirectoryPort and the invoice chain
"""
