"""
Demo: Run the analyzer on the example enums and print their exports.
"""

from enumfriendly.analyzer import analyze_enum
from enumfriendly.examples import Priority, StatusInt, StatusStr, StatusUnbacked
from enumfriendly.serialization import typescript_to_json


def print_report(report):
    """Pretty-print an EnumReport."""
    print()
    print("=" * 70)
    print(f"ENUM REPORT: {report.type_name}")
    print("=" * 70)
    print(f"  Shape:                 {report.shape}")
    print(f"  Variants:              {report.total_variants}")
    print(f"  Payload Types:         {', '.join(sorted(report.payload_types)) or 'None'}")
    print(f"  Descriptions:          {'YES' if report.has_description else 'NO'}")
    print(f"  Aliases:               {report.aliases or 'None'}")
    print(f"  Label Collisions:      {report.label_collisions or 'None'}")
    print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS")
    print()


def print_exports(enum_cls):
    print(f"  values():      {enum_cls.values()}")
    print(f"  readable():    {enum_cls.readable()}")
    print(f"  comment():     {enum_cls.comment()}")
    print(f"  to_json():     {enum_cls.to_json()}")
    print(f"  typescript:    {typescript_to_json(enum_cls)}")
    print(f"  random():      {enum_cls.random()}")
    print("  to_yaml():")
    for line in enum_cls.to_yaml().splitlines():
        print(f"    {line}")
    print()


if __name__ == "__main__":
    for host in (StatusStr, StatusInt, StatusUnbacked, Priority):
        print_report(analyze_enum(host))
        print_exports(host)

    for member in Priority:
        print(f"  {member.label():<15} {member.description() or '-'}")
