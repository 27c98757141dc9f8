#!/usr/bin/env python3
"""
Account Options

The accounts offered when a posting's account is changed. Options come from a
free-text list (one account per line); the editor ships a built-in list used
until the user stores one of their own.
"""

DEFAULT_ACCOUNT_OPTIONS: list[str] = [
    "assets:bank:dbs:mca",
    "assets:bank:dbs:multiplier",
    "assets:bank:dbs:paylah",
    "assets:bank:dbs:savings",
    "assets:bank:stanchart",
    "assets:bank:youtrip",
    "assets:broker:ibkr",
    "assets:cash",
    "assets:cpf:ma",
    "assets:cpf:oa",
    "assets:cpf:sa",
    "assets:receivables",
    "assets:receivables:handshakes",
    "assets:receivables:simin",
    "equity:conversion",
    "equity:dbs:rsp:nikkoAM",
    "equity:insurance:ge:wealthplan",
    "equity:openingbalances",
    "expenses:2024nz",
    "expenses:cartograph",
    "expenses:eatingout",
    "expenses:fees:dbsvickers",
    "expenses:fees:late",
    "expenses:food:dailymeals",
    "expenses:food:drinks",
    "expenses:food:eatingout",
    "expenses:food:eatingout:family",
    "expenses:food:eatingout:friends",
    "expenses:food:groceries",
    "expenses:food:groceries:tea",
    "expenses:food:officelunch",
    "expenses:food:orderin",
    "expenses:food:snacks",
    "expenses:gift",
    "expenses:gift:treat",
    "expenses:health:dental",
    "expenses:health:doctor",
    "expenses:health:fitness",
    "expenses:health:grooming",
    "expenses:health:medicine",
    "expenses:health:wellness",
    "expenses:house",
    "expenses:house:consummables",
    "expenses:house:diy",
    "expenses:house:equipment",
    "expenses:house:fittings",
    "expenses:house:furniture",
    "expenses:house:other",
    "expenses:house:reno",
    "expenses:house:things",
    "expenses:house:toiletries",
    "expenses:house:utilities",
    "expenses:house:utilities:mobile",
    "expenses:house:utilities:towncouncil",
    "expenses:insurance",
    "expenses:leisure",
    "expenses:leisure:books",
    "expenses:leisure:sports",
    "expenses:misc",
    "expenses:misc:fees",
    "expenses:other",
    "expenses:parents",
    "expenses:selfdevelopment",
    "expenses:shopping:clothes",
    "expenses:shopping:electronics",
    "expenses:shopping:hobbies",
    "expenses:shopping:other",
    "expenses:tax:incometax",
    "expenses:tax:property",
    "expenses:transport:bike",
    "expenses:transport:cab",
    "expenses:transport:carsharing",
    "expenses:transport:ezlink",
    "expenses:transport:taxi",
    "expenses:travel:2024india",
    "expenses:travel:2024india:insurance",
    "expenses:travel:2024maldives:flight",
    "expenses:travel:2024maldives:insurance",
    "expenses:travel:2024ny",
    "expenses:travel:2024nz",
    "expenses:travel:2024sumatra",
    "expenses:uncat",
    "expenses:wedding",
    "expenses:work",
    "income:dividends:cdp:cict",
    "income:dividends:cdp:zheneng",
    "income:dividends:dbsrsp",
    "income:dividends:dbsvickers",
    "income:gift:wedding",
    "income:interest:dbs",
    "income:misc",
    "income:salary:vmware",
    "income:salary:vmware:rsu",
    "liabilities:creditcard:citicashback",
    "liabilities:creditcard:citiprestige",
    "liabilities:creditcard:dbsaltitude",
    "liabilities:creditcard:hsbcrevo",
    "temp:bank:stanchart",
    "temp:creditcard:citicashback",
    "temp:creditcard:citiprestige",
    "temp:creditcard:dbsaltitude",
    "temp:creditcard:hsbcrevo",
    "temp:debitcard:youtrip",
]


def parse_account_options(text: str) -> list[str]:
    """
    Split an options blob into account names.

    Lines are stripped and empty ones dropped. Order is kept as written;
    duplicates are not removed.
    """
    return [line.strip() for line in text.splitlines() if line.strip()]


def filter_account_options(options: list[str], query: str) -> list[str]:
    """Case-insensitive substring search over options; an empty query matches everything."""
    needle = query.strip().lower()
    if not needle:
        return list(options)
    return [option for option in options if needle in option.lower()]
