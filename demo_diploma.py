#!/usr/bin/env python3
"""
Verkle Tree Demo for Academic Credentials
=========================================

Builds a diploma tree over a handful of micro-credentials, then proves and
verifies membership of individual credentials. Also shows what a tampered
record looks like to the verifier.
"""

from dataclasses import replace
from functools import singledispatch

from verkle_credentials import CredentialTree, Leaf, build_tree, config, generate_proof, load_records, verify_proof
from verkle_credentials.records import Record
from verkle_credentials.signing import generate_signing_keys, sign_tree, verify_tree_signature

DIPLOMA = {
    "id": "UNI2023-CS-84529",
    "metadata": {
        "studentName": "Jane Smith",
        "program": "Computer Science",
        "graduationDate": "2023-05-15",
        "issuer": "University of Technology",
        "degreeType": "Bachelor of Science",
        "gpa": "3.85",
        "honors": "Magna Cum Laude",
    },
}

MICRO_CREDENTIALS = [
    {"id": "CS101", "metadata": {"name": "Introduction to Programming", "grade": "A",
                                 "credits": "4", "date": "2019-12-15", "issuer": "University of Technology"}},
    {"id": "CS102", "metadata": {"name": "Data Structures", "grade": "A-",
                                 "credits": "4", "date": "2020-05-10", "issuer": "University of Technology"}},
    {"id": "IT211", "metadata": {"name": "Computer Networks", "grade": "B+",
                                 "credits": "3", "date": "2020-12-18", "issuer": "University of Technology"}},
    {"id": "IT212", "metadata": {"name": "Database Systems", "grade": "A",
                                 "credits": "3", "date": "2021-05-12", "issuer": "University of Technology"}},
    {"id": "CS301", "metadata": {"name": "Algorithms", "grade": "A",
                                 "credits": "4", "date": "2021-12-14", "issuer": "University of Technology"}},
    {"id": "CS350", "metadata": {"name": "Operating Systems", "grade": "B",
                                 "credits": "4", "date": "2022-05-09", "issuer": "University of Technology"}},
]


@singledispatch
def describe(node) -> str:
    raise TypeError(f"Cannot describe {type(node).__name__}")


@describe.register
def _(node: Leaf) -> str:
    m = node.record.metadata
    return (f"{m.get('name')} ({node.record.identifier}): {m.get('grade')}, "
            f"{m.get('credits')} credits, Issued: {m.get('date')} by {m.get('issuer')}")


@describe.register
def _(node: CredentialTree) -> str:
    m = node.diploma.metadata
    return (f"{m.get('degreeType')} in {m.get('program')} ({node.diploma.identifier}) - "
            f"{m.get('studentName')}, Graduated: {m.get('graduationDate')}, Issued by: {m.get('issuer')}")


def main():
    print("=" * 80)
    print("VERKLE TREE DEMO FOR ACADEMIC CREDENTIALS")
    print("=" * 80)

    diploma = Record.from_mapping(DIPLOMA)
    credentials = load_records(MICRO_CREDENTIALS)

    # 1. Build
    print(f"\n[1] Building tree for diploma with {len(credentials)} micro-credentials...")
    print(f"    branching factor {config.branching_factor}, depth {config.depth}, "
          f"max leaves {config.num_leaves}")
    tree = build_tree(diploma, credentials)

    print("\nDiploma Information:")
    print(describe(tree))
    print("\nMicro-credentials included in this diploma:")
    for idx, leaf in enumerate(tree.leaves):
        print(f"[{idx}] {describe(leaf)}")

    # 2. Issuer signs the header
    sk, vk = generate_signing_keys()
    sigma = sign_tree(sk, tree)
    ok = verify_tree_signature(vk, tree.diploma, tree.commitment, sigma)
    print(f"\n[2] Issuer signature valid: {'✅' if ok else '❌'}")

    # 3. Prove and verify
    for index in (0, 2, 5):
        print("\n" + "-" * 80)
        print(f"[3] PROOF FOR CREDENTIAL #{index}")
        print("-" * 80)
        proof = generate_proof(tree, index)
        print(f"Credential: {describe(tree.children[index])}")
        is_valid = verify_proof(tree.commitment, proof, tree.scheme)
        print(f"Credential proof is valid: {'YES ✓' if is_valid else 'NO ✗'}")

    # 4. Tampering
    print("\n[4] Tampering with a grade...")
    proof = generate_proof(tree, 2)
    forged = proof.record.with_field("grade", "A+")
    tampered = replace(proof, record=forged)
    is_valid = verify_proof(tree.commitment, tampered, tree.scheme)
    print(f"Tampered proof is valid: {'YES ✓' if is_valid else 'NO ✗'}")

    print("\n" + "=" * 80)
    print("DEMO COMPLETE")
    print("=" * 80)


if __name__ == "__main__":
    main()
