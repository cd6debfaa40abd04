"""
Sequence file reading (FASTA format)
"""
from typing import Dict


def read_fasta(filename: str) -> Dict[str, str]:
    """
    Read sequences from FASTA format file

    Args:
        filename: Path to FASTA file

    Returns:
        dict: Dictionary mapping sequence names to sequences (file order).
        A repeated name keeps its first record.

    Example:
        >>> sequences = read_fasta('seqs.fasta')
    """
    sequences = {}
    current_name = None
    current_seq = []

    with open(filename, 'r') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            if line.startswith('>'):
                if current_name is not None:
                    sequences.setdefault(current_name, ''.join(current_seq))
                header = line[1:].split()
                current_name = header[0] if header else f"seq{len(sequences) + 1}"
                current_seq = []
            else:
                current_seq.append(line)

        if current_name is not None:
            sequences.setdefault(current_name, ''.join(current_seq))

    return sequences


def read_first_sequence(filename: str) -> str:
    """First record of a FASTA file; ValueError if the file has none."""
    found = False
    current_seq = []

    with open(filename, 'r') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            if line.startswith('>'):
                if found:
                    break
                found = True
            elif found:
                current_seq.append(line)

    if not found:
        raise ValueError(f"No FASTA records found in {filename}")
    return ''.join(current_seq)
