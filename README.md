# donorbank

A small interactive console program for keeping a register of blood donors.
Donors are stored one per line in a plain text file, as comma-separated
fields:

```
id,    name,    address,    district,    blood type,    phone number
```

## Installing

```
pip install .
```

## Running

```
donorbank [data_file]
```

`data_file` is the donor file to use; it defaults to `data.txt` in the
current directory. The program also runs as `python -m donorbank.cli`.

The main menu (in Spanish) offers:

1. Register a donor: asks for id, name, address, department (district
   number), blood type (`A+`, `A-`, `B+`, `B-`, `AB+`, `AB-`, `O+`, `O-`,
   lower case accepted) and phone number, then appends the donor to the file.
   Numeric answers are asked again until they are digits only and fit in
   32 bits; the blood type is asked again until it is one of the accepted
   values.
2. Search donors by department, with an optional address substring and an
   optional exact blood type.
3. Delete a donor by name, asking for confirmation (`s`/`S` to remove) for
   each donor with that name. The file is rewritten with the remaining donors.
4. List every registered donor.
5. Quit.

Choice 6 asks for an applicant's name, identification and blood type. Any
other choice shows an error and returns to the menu. The program also ends
quietly when its input runs out. The screen is cleared between steps only
when output goes to a terminal.

## Using it as a library

- `donorbank.donor.Donor`: a dataclass for one donor record, with
  `Donor.parse_line(line)` to read a stored line, `to_line()` to write one
  and `details()` for a short name/district/blood type summary.
- `donorbank.storage.DonorFile`: the donor file. It can be iterated over to
  get donors, and has `append(donor)`, `load_all()`,
  `search(district, address_filter, blood_type_filter)` and
  `remove_by_name(name, confirm)`, where `confirm` is a callable that decides
  for each matching donor whether it is removed. `remove_by_name` returns
  whether any donor had the name and the list of donors removed.
- `donorbank.storage.parse_validation_response(text)`: reads a JSON reply of
  a phone validation service and returns `"true"` or `"false"` from its
  `isValid` field, or otherwise the string under `clave`.
- `donorbank.utils`: `trim`, `is_valid_number`, `convert_to_int`,
  `is_valid_blood_type` and `prompt_blood_type`.
- `donorbank.ui.UserInterface`: prompts and listings over any pair of text
  streams (`read_line`, `read_int`, `read_blood_type`, `display_provinces`,
  `display_blood_types`, `wait_for_key_press`, `clear_console`).
- `donorbank.manager.DonorManager(path, ui, phone_validator)`: the
  interactive register. `phone_validator` is an optional callable taking the
  phone number and returning `True` when it is acceptable; while it returns
  `False` the number is asked again.
- `donorbank.applicant.register_applicant(ui)`: asks for an applicant's
  details and returns an `Applicant`.

## What it does not do

- Phone numbers are not checked against any online service. The command
  line runs `DonorManager` without a phone validator, so any number is
  accepted; a validator has to be supplied by code that uses the library.
- Applicants entered through menu choice 6 are returned in memory only; they
  are not saved anywhere and cannot be listed.

## Tests

```
pip install .[test]
pytest
```