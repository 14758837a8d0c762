from fields.models import ElectricField, MagneticField
from fields.ops import format_components, format_scalar

# Sample inputs
E_COMPONENTS = (1e5, 10.9, 1.7e2)
E_SET = (3.0, 4.0, 12.0)
B_COMPONENTS = (0.3, -1.2, 2.4)
B_SET = (5.0, 0.0, 0.0)


def report_unit_vector(name: str, field: MagneticField) -> None:
    ok, unit = field.unit_vector()
    if ok:
        print(f"Unit vector of {name} = {format_components(unit)}")
    else:
        print(f"Unit vector of {name} is undefined (zero vector).")


def main() -> None:
    # 1. Electric fields
    e_default = ElectricField()
    e_components = ElectricField(*E_COMPONENTS)
    e_set = ElectricField()
    e_set.x, e_set.y, e_set.z = E_SET

    print(e_default.format("E_default"))
    print(e_components.format("E_components"))
    print(e_set.format("E_set"))

    print(f"Magnitude(E_default)   = {format_scalar(e_default.magnitude())}")
    print(f"Magnitude(E_components)= {format_scalar(e_components.magnitude())}")
    print(f"Magnitude(E_set)       = {format_scalar(e_set.magnitude())}")

    print(
        "Inner product (E_components · E_components) = "
        f"{format_scalar(e_components.inner_product())}\n"
    )

    # 2. Magnetic fields
    b_default = MagneticField()
    b_components = MagneticField(*B_COMPONENTS)
    b_set = MagneticField()
    b_set.set(*B_SET)

    print(b_default.format("B_default"))
    print(b_components.format("B_components"))
    print(b_set.format("B_set"))

    print(f"Magnitude(B_default)   = {format_scalar(b_default.magnitude())}")
    print(f"Magnitude(B_components)= {format_scalar(b_components.magnitude())}")
    print(f"Magnitude(B_set)       = {format_scalar(b_set.magnitude())}")

    report_unit_vector("B_components", b_components)
    report_unit_vector("B_default", b_default)


if __name__ == "__main__":
    main()
