"""Embedded registration-group dataset.

Rows follow the International ISBN Agency range message: the hyphenated
group prefix, the agency name, and the registrant ranges as 7-digit
``"start-end"`` spans paired with the registrant length. A length of 0
marks a range that is not yet assigned. Every row covers the full
``0000000-9999999`` span, and rows appear in range-message order.

Groups whose ranges are all unassigned (``978-611``) are omitted.

This module is data only; see :func:`isbnctl.domain.registry.default_table`.
"""

from __future__ import annotations

RangeRow = tuple[str, str, tuple[tuple[str, int], ...]]

REGISTRATION_GROUPS: tuple[RangeRow, ...] = (
    (
        "978-0",
        "English language",
        (
            ("0000000-1999999", 2),
            ("2000000-2279999", 3),
            ("2280000-2289999", 4),
            ("2290000-3689999", 3),
            ("3690000-3699999", 4),
            ("3700000-6389999", 3),
            ("6390000-6397999", 4),
            ("6398000-6399999", 7),
            ("6400000-6449999", 3),
            ("6450000-6459999", 7),
            ("6460000-6479999", 3),
            ("6480000-6489999", 7),
            ("6490000-6549999", 3),
            ("6550000-6559999", 4),
            ("6560000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9499999", 6),
            ("9500000-9999999", 7),
        ),
    ),
    (
        "978-1",
        "English language",
        (
            ("0000000-0999999", 2),
            ("1000000-3999999", 3),
            ("4000000-5499999", 4),
            ("5500000-7319999", 5),
            ("7320000-7399999", 7),
            ("7400000-7749999", 5),
            ("7750000-7753999", 7),
            ("7754000-7763999", 5),
            ("7764000-7764999", 7),
            ("7765000-7769999", 5),
            ("7770000-7782999", 7),
            ("7783000-7899999", 5),
            ("7900000-7999999", 4),
            ("8000000-8379999", 5),
            ("8380000-8384999", 7),
            ("8385000-8671999", 5),
            ("8672000-8675999", 4),
            ("8676000-8697999", 5),
            ("8698000-9159999", 6),
            ("9160000-9165059", 7),
            ("9165060-9168699", 6),
            ("9168700-9169079", 7),
            ("9169080-9195999", 6),
            ("9196000-9196549", 7),
            ("9196550-9729999", 6),
            ("9730000-9877999", 4),
            ("9878000-9989999", 6),
            ("9990000-9999999", 7),
        ),
    ),
    (
        "978-2",
        "French language",
        (
            ("0000000-1999999", 2),
            ("2000000-3499999", 3),
            ("3500000-3999999", 5),
            ("4000000-4869999", 3),
            ("4870000-4949999", 6),
            ("4950000-4959999", 3),
            ("4960000-4966999", 4),
            ("4967000-4969999", 5),
            ("4970000-5279999", 3),
            ("5280000-5299999", 4),
            ("5300000-6399999", 3),
            ("6400000-6479999", 4),
            ("6480000-6489999", 7),
            ("6490000-6999999", 3),
            ("7000000-8399999", 4),
            ("8400000-8999999", 5),
            ("9000000-9197999", 6),
            ("9198000-9198099", 5),
            ("9198100-9199429", 6),
            ("9199430-9199689", 7),
            ("9199690-9199999", 6),
            ("9200000-9499999", 5),
            ("9500000-9999999", 6),
        ),
    ),
    (
        "978-3",
        "German language",
        (
            ("0000000-0299999", 2),
            ("0300000-0339999", 3),
            ("0340000-0369999", 4),
            ("0370000-0399999", 5),
            ("0400000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9499999", 6),
            ("9500000-9539999", 7),
            ("9540000-9699999", 5),
            ("9700000-9849999", 7),
            ("9850000-9999999", 5),
        ),
    ),
    (
        "978-4",
        "Japan",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9499999", 6),
            ("9500000-9999999", 7),
        ),
    ),
    (
        "978-5",
        "former U.S.S.R",
        (
            ("0000000-0049999", 5),
            ("0050000-0099999", 4),
            ("0100000-1999999", 2),
            ("2000000-3619999", 3),
            ("3620000-3623999", 4),
            ("3624000-3629999", 7),
            ("3630000-4209999", 3),
            ("4210000-4299999", 4),
            ("4300000-4309999", 3),
            ("4310000-4399999", 4),
            ("4400000-4409999", 3),
            ("4410000-4499999", 4),
            ("4500000-6039999", 3),
            ("6040000-6049999", 7),
            ("6050000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9099999", 6),
            ("9100000-9199999", 5),
            ("9200000-9299999", 4),
            ("9300000-9499999", 5),
            ("9500000-9500999", 7),
            ("9501000-9799999", 4),
            ("9800000-9899999", 5),
            ("9900000-9909999", 7),
            ("9910000-9999999", 4),
        ),
    ),
    (
        "978-600",
        "Iran",
        (
            ("0000000-0999999", 2),
            ("1000000-4999999", 3),
            ("5000000-8999999", 4),
            ("9000000-9867999", 5),
            ("9868000-9929999", 4),
            ("9930000-9959999", 3),
            ("9960000-9999999", 5),
        ),
    ),
    (
        "978-601",
        "Kazakhstan",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-7999999", 4),
            ("8000000-8499999", 5),
            ("8500000-9999999", 2),
        ),
    ),
    (
        "978-602",
        "Indonesia",
        (
            ("0000000-0799999", 2),
            ("0800000-1399999", 4),
            ("1400000-1499999", 5),
            ("1500000-1699999", 4),
            ("1700000-1999999", 5),
            ("2000000-4999999", 3),
            ("5000000-5399999", 5),
            ("5400000-5999999", 4),
            ("6000000-6199999", 5),
            ("6200000-6999999", 4),
            ("7000000-7499999", 5),
            ("7500000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-603",
        "Saudi Arabia",
        (
            ("0000000-0499999", 2),
            ("0500000-4999999", 2),
            ("5000000-7999999", 3),
            ("8000000-8999999", 4),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-604",
        "Vietnam",
        (
            ("0000000-2999999", 1),
            ("3000000-3999999", 3),
            ("4000000-4699999", 2),
            ("4700000-4979999", 3),
            ("4980000-4999999", 4),
            ("5000000-8999999", 2),
            ("9000000-9799999", 3),
            ("9800000-9999999", 4),
        ),
    ),
    (
        "978-605",
        "Turkey",
        (
            ("0000000-0299999", 2),
            ("0300000-0599999", 3),
            ("0600000-0699999", 5),
            ("0700000-0999999", 2),
            ("1000000-1999999", 3),
            ("2000000-2399999", 4),
            ("2400000-3999999", 3),
            ("4000000-5999999", 4),
            ("6000000-7499999", 5),
            ("7500000-7999999", 4),
            ("8000000-8999999", 5),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-606",
        "Romania",
        (
            ("0000000-0999999", 3),
            ("1000000-4999999", 2),
            ("5000000-7999999", 3),
            ("8000000-9099999", 4),
            ("9100000-9199999", 3),
            ("9200000-9599999", 5),
            ("9600000-9749999", 4),
            ("9750000-9999999", 3),
        ),
    ),
    (
        "978-607",
        "Mexico",
        (
            ("0000000-3999999", 2),
            ("4000000-5929999", 3),
            ("5930000-5999999", 5),
            ("6000000-7499999", 3),
            ("7500000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-608",
        "North Macedonia",
        (
            ("0000000-0999999", 1),
            ("1000000-1999999", 2),
            ("2000000-4499999", 3),
            ("4500000-6499999", 4),
            ("6500000-6999999", 5),
            ("7000000-9999999", 1),
        ),
    ),
    (
        "978-609",
        "Lithuania",
        (
            ("0000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-612",
        "Peru",
        (
            ("0000000-2999999", 2),
            ("3000000-3999999", 3),
            ("4000000-4499999", 4),
            ("4500000-4999999", 5),
            ("5000000-5149999", 4),
            ("5150000-9999999", 0),
        ),
    ),
    (
        "978-613",
        "Mauritius",
        (
            ("0000000-9999999", 1),
        ),
    ),
    (
        "978-614",
        "Lebanon",
        (
            ("0000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-615",
        "Hungary",
        (
            ("0000000-0999999", 2),
            ("1000000-4999999", 3),
            ("5000000-7999999", 4),
            ("8000000-8999999", 5),
            ("9000000-9999999", 0),
        ),
    ),
    (
        "978-616",
        "Thailand",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8999999", 4),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-617",
        "Ukraine",
        (
            ("0000000-4999999", 2),
            ("5000000-6999999", 3),
            ("7000000-8999999", 4),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-618",
        "Greece",
        (
            ("0000000-1999999", 2),
            ("2000000-4999999", 3),
            ("5000000-7999999", 4),
            ("8000000-9999999", 5),
        ),
    ),
    (
        "978-619",
        "Bulgaria",
        (
            ("0000000-1499999", 2),
            ("1500000-6999999", 3),
            ("7000000-8999999", 4),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-620",
        "Mauritius",
        (
            ("0000000-9999999", 1),
        ),
    ),
    (
        "978-621",
        "Philippines",
        (
            ("0000000-2999999", 2),
            ("3000000-3999999", 0),
            ("4000000-5999999", 3),
            ("6000000-7999999", 0),
            ("8000000-8999999", 4),
            ("9000000-9499999", 0),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-622",
        "Iran",
        (
            ("0000000-1099999", 2),
            ("1100000-1999999", 0),
            ("2000000-4599999", 3),
            ("4600000-8749999", 4),
            ("8750000-9999999", 5),
        ),
    ),
    (
        "978-623",
        "Indonesia",
        (
            ("0000000-1099999", 2),
            ("1100000-5249999", 3),
            ("5250000-8799999", 4),
            ("8800000-9999999", 5),
        ),
    ),
    (
        "978-624",
        "Sri Lanka",
        (
            ("0000000-0499999", 2),
            ("0500000-1999999", 0),
            ("2000000-2499999", 3),
            ("2500000-4999999", 0),
            ("5000000-6699999", 4),
            ("6700000-9299999", 0),
            ("9300000-9999999", 5),
        ),
    ),
    (
        "978-625",
        "Türkiye",
        (
            ("0000000-0199999", 2),
            ("0200000-3649999", 0),
            ("3650000-4429999", 3),
            ("4430000-4449999", 5),
            ("4450000-4499999", 3),
            ("4500000-6349999", 0),
            ("6350000-7793999", 4),
            ("7794000-7794999", 5),
            ("7795000-8499999", 4),
            ("8500000-9399999", 0),
            ("9400000-9999999", 5),
        ),
    ),
    (
        "978-626",
        "Taiwan",
        (
            ("0000000-0499999", 2),
            ("0500000-2999999", 0),
            ("3000000-4999999", 3),
            ("5000000-6999999", 0),
            ("7000000-7999999", 4),
            ("8000000-9499999", 0),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-627",
        "Pakistan",
        (
            ("0000000-2999999", 0),
            ("3000000-3199999", 2),
            ("3200000-4999999", 0),
            ("5000000-5249999", 3),
            ("5250000-7499999", 0),
            ("7500000-7999999", 4),
            ("8000000-9449999", 0),
            ("9450000-9464999", 5),
            ("9465000-9999999", 0),
        ),
    ),
    (
        "978-628",
        "Colombia",
        (
            ("0000000-0999999", 2),
            ("1000000-4999999", 0),
            ("5000000-5499999", 3),
            ("5500000-7499999", 0),
            ("7500000-8499999", 4),
            ("8500000-9499999", 0),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-629",
        "Malaysia",
        (
            ("0000000-0299999", 2),
            ("0300000-4599999", 0),
            ("4600000-4999999", 3),
            ("5000000-7499999", 0),
            ("7500000-7999999", 4),
            ("8000000-9499999", 0),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-630",
        "Romania",
        (
            ("0000000-2999999", 0),
            ("3000000-3499999", 3),
            ("3500000-6499999", 0),
            ("6500000-6849999", 4),
            ("6850000-9499999", 0),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-631",
        "Argentina",
        (
            ("0000000-0999999", 2),
            ("1000000-2999999", 0),
            ("3000000-3999999", 3),
            ("4000000-6499999", 0),
            ("6500000-7499999", 4),
            ("7500000-8999999", 0),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-632",
        "Vietnam",
        (
            ("0000000-1199999", 2),
            ("1200000-5999999", 0),
            ("6000000-6799999", 3),
            ("6800000-9999999", 0),
        ),
    ),
    (
        "978-633",
        "Egypt",
        (
            ("0000000-0199999", 2),
            ("0200000-2999999", 0),
            ("3000000-3499999", 3),
            ("3500000-8249999", 0),
            ("8250000-8999999", 4),
            ("9000000-9949999", 0),
            ("9950000-9999999", 5),
        ),
    ),
    (
        "978-634",
        "Indonesia",
        (
            ("0000000-0499999", 2),
            ("0500000-1999999", 0),
            ("2000000-3499999", 3),
            ("3500000-6999999", 0),
            ("7000000-7999999", 4),
            ("8000000-9599999", 0),
            ("9600000-9999999", 5),
        ),
    ),
    (
        "978-65",
        "Brazil",
        (
            ("0000000-0199999", 2),
            ("0200000-2499999", 0),
            ("2500000-3029999", 3),
            ("3030000-4999999", 0),
            ("5000000-5129999", 4),
            ("5130000-5349999", 0),
            ("5350000-6149999", 4),
            ("6150000-7999999", 0),
            ("8000000-8182499", 5),
            ("8182500-8374999", 0),
            ("8375000-8999999", 5),
            ("9000000-9024499", 6),
            ("9024500-9799999", 0),
            ("9800000-9999999", 6),
        ),
    ),
    (
        "978-7",
        "China, People's Republic",
        (
            ("0000000-0999999", 2),
            ("1000000-4999999", 3),
            ("5000000-7999999", 4),
            ("8000000-8999999", 5),
            ("9000000-9999999", 6),
        ),
    ),
    (
        "978-80",
        "former Czechoslovakia",
        (
            ("0000000-1999999", 2),
            ("2000000-5299999", 3),
            ("5300000-5499999", 5),
            ("5500000-6899999", 3),
            ("6900000-6999999", 4),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9989999", 6),
            ("9990000-9999999", 5),
        ),
    ),
    (
        "978-81",
        "India",
        (
            ("0000000-1899999", 2),
            ("1900000-1999999", 5),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9999999", 6),
        ),
    ),
    (
        "978-82",
        "Norway",
        (
            ("0000000-1999999", 2),
            ("2000000-6899999", 3),
            ("6900000-6999999", 6),
            ("7000000-8999999", 4),
            ("9000000-9899999", 5),
            ("9900000-9999999", 6),
        ),
    ),
    (
        "978-83",
        "Poland",
        (
            ("0000000-1999999", 2),
            ("2000000-5999999", 3),
            ("6000000-6999999", 5),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9999999", 6),
        ),
    ),
    (
        "978-84",
        "Spain",
        (
            ("0000000-1399999", 2),
            ("1400000-1499999", 3),
            ("1500000-1999999", 5),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9199999", 4),
            ("9200000-9239999", 6),
            ("9240000-9299999", 5),
            ("9300000-9499999", 6),
            ("9500000-9699999", 5),
            ("9700000-9999999", 4),
        ),
    ),
    (
        "978-85",
        "Brazil",
        (
            ("0000000-1999999", 2),
            ("2000000-4549999", 3),
            ("4550000-4552999", 6),
            ("4553000-4559999", 5),
            ("4560000-5289999", 3),
            ("5290000-5319999", 5),
            ("5320000-5339999", 4),
            ("5340000-5399999", 3),
            ("5400000-5439999", 5),
            ("5440000-5479999", 4),
            ("5480000-5499999", 5),
            ("5500000-5999999", 4),
            ("6000000-6999999", 5),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9249999", 6),
            ("9250000-9449999", 5),
            ("9450000-9599999", 4),
            ("9600000-9799999", 2),
            ("9800000-9999999", 5),
        ),
    ),
    (
        "978-86",
        "former Yugoslavia",
        (
            ("0000000-2999999", 2),
            ("3000000-5999999", 3),
            ("6000000-7999999", 4),
            ("8000000-8999999", 5),
            ("9000000-9999999", 6),
        ),
    ),
    (
        "978-87",
        "Denmark",
        (
            ("0000000-2999999", 2),
            ("3000000-3999999", 0),
            ("4000000-6499999", 3),
            ("6500000-6999999", 0),
            ("7000000-7999999", 4),
            ("8000000-8499999", 0),
            ("8500000-9499999", 5),
            ("9500000-9699999", 0),
            ("9700000-9999999", 6),
        ),
    ),
    (
        "978-88",
        "Italy",
        (
            ("0000000-1999999", 2),
            ("2000000-3119999", 3),
            ("3120000-3149999", 5),
            ("3150000-3189999", 3),
            ("3190000-3229999", 5),
            ("3230000-3269999", 3),
            ("3270000-3389999", 4),
            ("3390000-3609999", 3),
            ("3610000-3629999", 4),
            ("3630000-5489999", 3),
            ("5490000-5549999", 4),
            ("5550000-5999999", 3),
            ("6000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9029999", 6),
            ("9030000-9299999", 4),
            ("9300000-9399999", 3),
            ("9400000-9479999", 6),
            ("9480000-9999999", 5),
        ),
    ),
    (
        "978-89",
        "Korea, Republic",
        (
            ("0000000-2499999", 2),
            ("2500000-5499999", 3),
            ("5500000-8499999", 4),
            ("8500000-9499999", 5),
            ("9500000-9699999", 6),
            ("9700000-9899999", 5),
            ("9900000-9999999", 3),
        ),
    ),
    (
        "978-90",
        "Netherlands",
        (
            ("0000000-1999999", 2),
            ("2000000-4999999", 3),
            ("5000000-6999999", 4),
            ("7000000-7999999", 5),
            ("8000000-8499999", 6),
            ("8500000-8999999", 4),
            ("9000000-9099999", 2),
            ("9100000-9399999", 6),
            ("9400000-9499999", 2),
            ("9500000-9999999", 6),
        ),
    ),
    (
        "978-91",
        "Sweden",
        (
            ("0000000-1999999", 1),
            ("2000000-4999999", 2),
            ("5000000-6499999", 3),
            ("6500000-6999999", 0),
            ("7000000-8199999", 4),
            ("8200000-8499999", 0),
            ("8500000-9499999", 5),
            ("9500000-9699999", 0),
            ("9700000-9999999", 6),
        ),
    ),
    (
        "978-92",
        "International NGO Publishers and EU Organizations",
        (
            ("0000000-5999999", 1),
            ("6000000-7999999", 2),
            ("8000000-8999999", 3),
            ("9000000-9499999", 4),
            ("9500000-9899999", 5),
            ("9900000-9999999", 6),
        ),
    ),
    (
        "978-93",
        "India",
        (
            ("0000000-0999999", 2),
            ("1000000-4999999", 3),
            ("5000000-7999999", 4),
            ("8000000-9599999", 5),
            ("9600000-9999999", 6),
        ),
    ),
    (
        "978-94",
        "Netherlands",
        (
            ("0000000-5999999", 3),
            ("6000000-8999999", 4),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-950",
        "Argentina",
        (
            ("0000000-4999999", 2),
            ("5000000-8999999", 3),
            ("9000000-9899999", 4),
            ("9900000-9999999", 5),
        ),
    ),
    (
        "978-951",
        "Finland",
        (
            ("0000000-1999999", 1),
            ("2000000-5499999", 2),
            ("5500000-8899999", 3),
            ("8900000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-952",
        "Finland",
        (
            ("0000000-1999999", 2),
            ("2000000-4999999", 3),
            ("5000000-5999999", 4),
            ("6000000-6599999", 2),
            ("6600000-6699999", 4),
            ("6700000-6999999", 5),
            ("7000000-7999999", 4),
            ("8000000-9499999", 2),
            ("9500000-9899999", 4),
            ("9900000-9999999", 5),
        ),
    ),
    (
        "978-953",
        "Croatia",
        (
            ("0000000-0999999", 1),
            ("1000000-1499999", 2),
            ("1500000-4799999", 3),
            ("4800000-4999999", 5),
            ("5000000-5009999", 3),
            ("5010000-5099999", 5),
            ("5100000-5499999", 2),
            ("5500000-5999999", 5),
            ("6000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-954",
        "Bulgaria",
        (
            ("0000000-2899999", 2),
            ("2900000-2999999", 4),
            ("3000000-7999999", 3),
            ("8000000-8999999", 4),
            ("9000000-9299999", 5),
            ("9300000-9999999", 4),
        ),
    ),
    (
        "978-955",
        "Sri Lanka",
        (
            ("0000000-1999999", 4),
            ("2000000-3399999", 2),
            ("3400000-3549999", 4),
            ("3550000-3599999", 5),
            ("3600000-3799999", 4),
            ("3800000-3899999", 5),
            ("3900000-4099999", 4),
            ("4100000-4499999", 5),
            ("4500000-4999999", 4),
            ("5000000-5499999", 5),
            ("5500000-7109999", 3),
            ("7110000-7149999", 5),
            ("7150000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-956",
        "Chile",
        (
            ("0000000-0899999", 2),
            ("0900000-0999999", 5),
            ("1000000-1999999", 2),
            ("2000000-5999999", 3),
            ("6000000-6999999", 4),
            ("7000000-9999999", 4),
        ),
    ),
    (
        "978-957",
        "Taiwan",
        (
            ("0000000-0299999", 2),
            ("0300000-0499999", 4),
            ("0500000-1999999", 2),
            ("2000000-2099999", 4),
            ("2100000-2799999", 2),
            ("2800000-3099999", 5),
            ("3100000-4399999", 2),
            ("4400000-8199999", 3),
            ("8200000-9699999", 4),
            ("9700000-9999999", 5),
        ),
    ),
    (
        "978-958",
        "Colombia",
        (
            ("0000000-4999999", 2),
            ("5000000-5099999", 3),
            ("5100000-5199999", 4),
            ("5200000-5399999", 5),
            ("5400000-5599999", 4),
            ("5600000-5999999", 5),
            ("6000000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-959",
        "Cuba",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-9999999", 5),
        ),
    ),
    (
        "978-960",
        "Greece",
        (
            ("0000000-1999999", 2),
            ("2000000-6599999", 3),
            ("6600000-6899999", 4),
            ("6900000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-9299999", 5),
            ("9300000-9399999", 2),
            ("9400000-9799999", 4),
            ("9800000-9999999", 5),
        ),
    ),
    (
        "978-961",
        "Slovenia",
        (
            ("0000000-1999999", 2),
            ("2000000-5999999", 3),
            ("6000000-8999999", 4),
            ("9000000-9799999", 5),
            ("9800000-9999999", 0),
        ),
    ),
    (
        "978-962",
        "Hong Kong, China",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8499999", 5),
            ("8500000-8999999", 4),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-963",
        "Hungary",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-8999999", 5),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-964",
        "Iran",
        (
            ("0000000-1499999", 2),
            ("1500000-2499999", 3),
            ("2500000-2999999", 4),
            ("3000000-5499999", 3),
            ("5500000-8999999", 4),
            ("9000000-9699999", 5),
            ("9700000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-965",
        "Israel",
        (
            ("0000000-1999999", 2),
            ("2000000-5999999", 3),
            ("6000000-6999999", 0),
            ("7000000-7999999", 4),
            ("8000000-9999999", 5),
        ),
    ),
    (
        "978-966",
        "Ukraine",
        (
            ("0000000-1299999", 2),
            ("1300000-1399999", 3),
            ("1400000-1499999", 2),
            ("1500000-1699999", 4),
            ("1700000-1999999", 3),
            ("2000000-2789999", 4),
            ("2790000-2899999", 3),
            ("2900000-2999999", 4),
            ("3000000-6999999", 3),
            ("7000000-8999999", 4),
            ("9000000-9099999", 5),
            ("9100000-9499999", 3),
            ("9500000-9799999", 5),
            ("9800000-9999999", 3),
        ),
    ),
    (
        "978-967",
        "Malaysia",
        (
            ("0000000-0999999", 4),
            ("1000000-1999999", 5),
            ("2000000-2499999", 4),
            ("2500000-2999999", 0),
            ("3000000-4999999", 3),
            ("5000000-5999999", 4),
            ("6000000-8999999", 2),
            ("9000000-9899999", 3),
            ("9900000-9989999", 4),
            ("9990000-9999999", 5),
        ),
    ),
    (
        "978-968",
        "Mexico",
        (
            ("0000000-0099999", 0),
            ("0100000-3999999", 2),
            ("4000000-4999999", 3),
            ("5000000-7999999", 4),
            ("8000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-969",
        "Pakistan",
        (
            ("0000000-1999999", 1),
            ("2000000-2299999", 2),
            ("2300000-2399999", 5),
            ("2400000-3999999", 2),
            ("4000000-7499999", 3),
            ("7500000-9999999", 4),
        ),
    ),
    (
        "978-970",
        "Mexico",
        (
            ("0000000-0099999", 0),
            ("0100000-5999999", 2),
            ("6000000-8999999", 3),
            ("9000000-9099999", 4),
            ("9100000-9699999", 5),
            ("9700000-9999999", 4),
        ),
    ),
    (
        "978-971",
        "Philippines",
        (
            ("0000000-0159999", 3),
            ("0160000-0199999", 4),
            ("0200000-0299999", 2),
            ("0300000-0599999", 4),
            ("0600000-4999999", 2),
            ("5000000-8499999", 3),
            ("8500000-9099999", 4),
            ("9100000-9599999", 5),
            ("9600000-9699999", 4),
            ("9700000-9899999", 2),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-972",
        "Portugal",
        (
            ("0000000-1999999", 1),
            ("2000000-5499999", 2),
            ("5500000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-973",
        "Romania",
        (
            ("0000000-0999999", 1),
            ("1000000-1699999", 3),
            ("1700000-1999999", 4),
            ("2000000-5499999", 2),
            ("5500000-7599999", 3),
            ("7600000-8499999", 4),
            ("8500000-8899999", 5),
            ("8900000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-974",
        "Thailand",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8499999", 4),
            ("8500000-9499999", 5),
            ("9500000-9999999", 4),
        ),
    ),
    (
        "978-975",
        "Türkiye",
        (
            ("0000000-0199999", 5),
            ("0200000-2499999", 2),
            ("2500000-5999999", 3),
            ("6000000-9199999", 4),
            ("9200000-9899999", 5),
            ("9900000-9999999", 3),
        ),
    ),
    (
        "978-976",
        "Caribbean Community",
        (
            ("0000000-3999999", 1),
            ("4000000-5999999", 2),
            ("6000000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-977",
        "Egypt",
        (
            ("0000000-1999999", 2),
            ("2000000-4999999", 3),
            ("5000000-6999999", 4),
            ("7000000-8499999", 3),
            ("8500000-8999999", 5),
            ("9000000-9899999", 2),
            ("9900000-9999999", 3),
        ),
    ),
    (
        "978-978",
        "Nigeria",
        (
            ("0000000-1999999", 3),
            ("2000000-2999999", 4),
            ("3000000-7999999", 5),
            ("8000000-8999999", 4),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-979",
        "Indonesia",
        (
            ("0000000-0999999", 3),
            ("1000000-1499999", 4),
            ("1500000-1999999", 5),
            ("2000000-2999999", 2),
            ("3000000-3999999", 4),
            ("4000000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-980",
        "Venezuela",
        (
            ("0000000-1999999", 2),
            ("2000000-5999999", 3),
            ("6000000-9999999", 4),
        ),
    ),
    (
        "978-981",
        "Singapore",
        (
            ("0000000-1699999", 2),
            ("1700000-1799999", 5),
            ("1800000-1999999", 2),
            ("2000000-2999999", 3),
            ("3000000-3099999", 4),
            ("3100000-3999999", 3),
            ("4000000-9999999", 4),
        ),
    ),
    (
        "978-982",
        "South Pacific",
        (
            ("0000000-0999999", 2),
            ("1000000-6999999", 3),
            ("7000000-8999999", 2),
            ("9000000-9799999", 4),
            ("9800000-9999999", 5),
        ),
    ),
    (
        "978-983",
        "Malaysia",
        (
            ("0000000-0199999", 2),
            ("0200000-1999999", 3),
            ("2000000-3999999", 4),
            ("4000000-4499999", 5),
            ("4500000-7999999", 2),
            ("8000000-8999999", 3),
            ("9000000-9899999", 4),
            ("9900000-9999999", 5),
        ),
    ),
    (
        "978-984",
        "Bangladesh",
        (
            ("0000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-8999999", 4),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-985",
        "Belarus",
        (
            ("0000000-3999999", 2),
            ("4000000-5999999", 3),
            ("6000000-8799999", 4),
            ("8800000-8999999", 3),
            ("9000000-9999999", 5),
        ),
    ),
    (
        "978-986",
        "Taiwan",
        (
            ("0000000-0599999", 2),
            ("0600000-0699999", 5),
            ("0700000-0799999", 4),
            ("0800000-1199999", 2),
            ("1200000-5399999", 3),
            ("5400000-7999999", 4),
            ("8000000-9999999", 5),
        ),
    ),
    (
        "978-987",
        "Argentina",
        (
            ("0000000-0999999", 2),
            ("1000000-1999999", 4),
            ("2000000-2999999", 5),
            ("3000000-3599999", 2),
            ("3600000-4199999", 4),
            ("4200000-4399999", 2),
            ("4400000-4499999", 4),
            ("4500000-4899999", 5),
            ("4900000-4999999", 4),
            ("5000000-8249999", 3),
            ("8250000-8279999", 4),
            ("8280000-8299999", 5),
            ("8300000-8499999", 4),
            ("8500000-8899999", 2),
            ("8900000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-988",
        "Hong Kong, China",
        (
            ("0000000-1199999", 2),
            ("1200000-1999999", 5),
            ("2000000-7399999", 3),
            ("7400000-7999999", 5),
            ("8000000-9699999", 4),
            ("9700000-9999999", 5),
        ),
    ),
    (
        "978-989",
        "Portugal",
        (
            ("0000000-1999999", 1),
            ("2000000-3499999", 2),
            ("3500000-3699999", 5),
            ("3700000-5299999", 2),
            ("5300000-5499999", 5),
            ("5500000-7999999", 3),
            ("8000000-9499999", 4),
            ("9500000-9999999", 5),
        ),
    ),
    (
        "978-9907",
        "Ecuador",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-6499999", 2),
            ("6500000-7999999", 0),
            ("8000000-8749999", 3),
            ("8750000-9999999", 0),
        ),
    ),
    (
        "978-9908",
        "Estonia",
        (
            ("0000000-2999999", 1),
            ("3000000-4999999", 0),
            ("5000000-8499999", 2),
            ("8500000-8999999", 0),
            ("9000000-9499999", 3),
            ("9500000-9999999", 0),
        ),
    ),
    (
        "978-9909",
        "Tunisia",
        (
            ("0000000-1999999", 2),
            ("2000000-7499999", 0),
            ("7500000-9799999", 3),
            ("9800000-9999999", 4),
        ),
    ),
    (
        "978-9910",
        "Uzbekistan",
        (
            ("0000000-0099999", 0),
            ("0100000-1699999", 2),
            ("1700000-6499999", 0),
            ("6500000-7999999", 3),
            ("8000000-8999999", 0),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9911",
        "Montenegro",
        (
            ("0000000-1999999", 0),
            ("2000000-2499999", 2),
            ("2500000-5499999", 0),
            ("5500000-7499999", 3),
            ("7500000-9999999", 0),
        ),
    ),
    (
        "978-9912",
        "Tanzania",
        (
            ("0000000-3999999", 0),
            ("4000000-4499999", 2),
            ("4500000-7499999", 0),
            ("7500000-7999999", 3),
            ("8000000-9799999", 0),
            ("9800000-9999999", 4),
        ),
    ),
    (
        "978-9913",
        "Uganda",
        (
            ("0000000-0799999", 2),
            ("0800000-5999999", 0),
            ("6000000-6999999", 3),
            ("7000000-9549999", 0),
            ("9550000-9999999", 4),
        ),
    ),
    (
        "978-9914",
        "Kenya",
        (
            ("0000000-3999999", 0),
            ("4000000-5599999", 2),
            ("5600000-6999999", 0),
            ("7000000-7749999", 3),
            ("7750000-9449999", 0),
            ("9450000-9999999", 4),
        ),
    ),
    (
        "978-9915",
        "Uruguay",
        (
            ("0000000-3999999", 0),
            ("4000000-5999999", 2),
            ("6000000-6499999", 0),
            ("6500000-7999999", 3),
            ("8000000-9299999", 0),
            ("9300000-9999999", 4),
        ),
    ),
    (
        "978-9916",
        "Estonia",
        (
            ("0000000-0999999", 1),
            ("1000000-3999999", 2),
            ("4000000-5999999", 1),
            ("6000000-7899999", 3),
            ("7900000-9249999", 0),
            ("9250000-9999999", 4),
        ),
    ),
    (
        "978-9917",
        "Bolivia",
        (
            ("0000000-2999999", 1),
            ("3000000-3499999", 2),
            ("3500000-5999999", 0),
            ("6000000-6999999", 3),
            ("7000000-9799999", 0),
            ("9800000-9999999", 4),
        ),
    ),
    (
        "978-9918",
        "Malta",
        (
            ("0000000-0999999", 1),
            ("1000000-1999999", 0),
            ("2000000-2999999", 2),
            ("3000000-5999999", 0),
            ("6000000-7999999", 3),
            ("8000000-9499999", 0),
            ("9500000-9999999", 4),
        ),
    ),
    (
        "978-9919",
        "Mongolia",
        (
            ("0000000-0999999", 1),
            ("1000000-1999999", 0),
            ("2000000-2999999", 2),
            ("3000000-4999999", 0),
            ("5000000-5999999", 3),
            ("6000000-8999999", 0),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9920",
        "Japan",
        (
            ("0000000-2999999", 0),
            ("3000000-4299999", 2),
            ("4300000-4999999", 0),
            ("5000000-5499999", 4),
            ("5500000-8749999", 0),
            ("8750000-9999999", 4),
        ),
    ),
    (
        "978-9921",
        "Kuwait",
        (
            ("0000000-0999999", 1),
            ("1000000-2999999", 0),
            ("3000000-3999999", 2),
            ("4000000-6999999", 0),
            ("7000000-8999999", 3),
            ("9000000-9699999", 0),
            ("9700000-9999999", 4),
        ),
    ),
    (
        "978-9922",
        "Iraq",
        (
            ("0000000-1999999", 0),
            ("2000000-2999999", 2),
            ("3000000-5999999", 0),
            ("6000000-7999999", 3),
            ("8000000-8249999", 0),
            ("8250000-9999999", 4),
        ),
    ),
    (
        "978-9923",
        "Jordan",
        (
            ("0000000-0999999", 1),
            ("1000000-6999999", 2),
            ("7000000-8999999", 3),
            ("9000000-9399999", 0),
            ("9400000-9999999", 4),
        ),
    ),
    (
        "978-9924",
        "Cambodia",
        (
            ("0000000-2999999", 0),
            ("3000000-3999999", 2),
            ("4000000-4999999", 0),
            ("5000000-6499999", 3),
            ("6500000-8999999", 0),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9925",
        "Cyprus",
        (
            ("0000000-2999999", 1),
            ("3000000-5499999", 2),
            ("5500000-7349999", 3),
            ("7350000-9999999", 4),
        ),
    ),
    (
        "978-9926",
        "Bosnia and Herzegovina",
        (
            ("0000000-1999999", 1),
            ("2000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-9999999", 4),
        ),
    ),
    (
        "978-9927",
        "Qatar",
        (
            ("0000000-0999999", 2),
            ("1000000-3999999", 3),
            ("4000000-4999999", 4),
            ("5000000-9999999", 0),
        ),
    ),
    (
        "978-9928",
        "Albania",
        (
            ("0000000-0999999", 2),
            ("1000000-3999999", 3),
            ("4000000-4999999", 4),
            ("5000000-9999999", 0),
        ),
    ),
    (
        "978-9929",
        "Guatemala",
        (
            ("0000000-3999999", 1),
            ("4000000-5499999", 2),
            ("5500000-7999999", 3),
            ("8000000-9999999", 4),
        ),
    ),
    (
        "978-9930",
        "Costa Rica",
        (
            ("0000000-4999999", 2),
            ("5000000-9399999", 3),
            ("9400000-9999999", 4),
        ),
    ),
    (
        "978-9931",
        "Algeria",
        (
            ("0000000-2399999", 2),
            ("2400000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9932",
        "Lao People's Democratic Republic",
        (
            ("0000000-3999999", 2),
            ("4000000-8499999", 3),
            ("8500000-9999999", 4),
        ),
    ),
    (
        "978-9933",
        "Syria",
        (
            ("0000000-0999999", 1),
            ("1000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9934",
        "Latvia",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 2),
            ("5000000-7999999", 3),
            ("8000000-9999999", 4),
        ),
    ),
    (
        "978-9935",
        "Iceland",
        (
            ("0000000-0999999", 1),
            ("1000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9936",
        "Afghanistan",
        (
            ("0000000-1999999", 1),
            ("2000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-9999999", 4),
        ),
    ),
    (
        "978-9937",
        "Nepal",
        (
            ("0000000-2999999", 1),
            ("3000000-4999999", 2),
            ("5000000-7999999", 3),
            ("8000000-9999999", 4),
        ),
    ),
    (
        "978-9938",
        "Tunisia",
        (
            ("0000000-7999999", 2),
            ("8000000-9499999", 3),
            ("9500000-9999999", 4),
        ),
    ),
    (
        "978-9939",
        "Armenia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9940",
        "Montenegro",
        (
            ("0000000-1999999", 1),
            ("2000000-4999999", 2),
            ("5000000-8399999", 3),
            ("8400000-8699999", 2),
            ("8700000-9999999", 4),
        ),
    ),
    (
        "978-9941",
        "Georgia",
        (
            ("0000000-0999999", 1),
            ("1000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-8999999", 1),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9942",
        "Ecuador",
        (
            ("0000000-5999999", 2),
            ("6000000-6999999", 3),
            ("7000000-7499999", 4),
            ("7500000-8499999", 3),
            ("8500000-8999999", 4),
            ("9000000-9849999", 3),
            ("9850000-9999999", 4),
        ),
    ),
    (
        "978-9943",
        "Uzbekistan",
        (
            ("0000000-2999999", 2),
            ("3000000-3999999", 3),
            ("4000000-9749999", 4),
            ("9750000-9999999", 3),
        ),
    ),
    (
        "978-9944",
        "Türkiye",
        (
            ("0000000-0999999", 4),
            ("1000000-4999999", 3),
            ("5000000-5999999", 4),
            ("6000000-6999999", 2),
            ("7000000-7999999", 3),
            ("8000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-9945",
        "Dominican Republic",
        (
            ("0000000-0099999", 2),
            ("0100000-0799999", 3),
            ("0800000-3999999", 2),
            ("4000000-5699999", 3),
            ("5700000-5799999", 2),
            ("5800000-8499999", 3),
            ("8500000-9999999", 4),
        ),
    ),
    (
        "978-9946",
        "Korea, P.D.R.",
        (
            ("0000000-1999999", 1),
            ("2000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9947",
        "Algeria",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-9948",
        "United Arab Emirates",
        (
            ("0000000-3999999", 2),
            ("4000000-8499999", 3),
            ("8500000-9999999", 4),
        ),
    ),
    (
        "978-9949",
        "Estonia",
        (
            ("0000000-0899999", 2),
            ("0900000-0999999", 3),
            ("1000000-3999999", 2),
            ("4000000-6999999", 3),
            ("7000000-7199999", 2),
            ("7200000-7499999", 4),
            ("7500000-8999999", 2),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9950",
        "Palestine",
        (
            ("0000000-2999999", 2),
            ("3000000-8499999", 3),
            ("8500000-9999999", 4),
        ),
    ),
    (
        "978-9951",
        "Kosova",
        (
            ("0000000-3899999", 2),
            ("3900000-8499999", 3),
            ("8500000-9799999", 4),
            ("9800000-9999999", 3),
        ),
    ),
    (
        "978-9952",
        "Azerbaijan",
        (
            ("0000000-1999999", 1),
            ("2000000-3999999", 2),
            ("4000000-4999999", 4),
            ("5000000-7999999", 2),
            ("8000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9953",
        "Lebanon",
        (
            ("0000000-0999999", 1),
            ("1000000-3999999", 2),
            ("4000000-5999999", 3),
            ("6000000-8999999", 2),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9954",
        "Morocco",
        (
            ("0000000-1999999", 1),
            ("2000000-3999999", 2),
            ("4000000-7999999", 3),
            ("8000000-9899999", 4),
            ("9900000-9999999", 2),
        ),
    ),
    (
        "978-9955",
        "Lithuania",
        (
            ("0000000-3999999", 2),
            ("4000000-9299999", 3),
            ("9300000-9999999", 4),
        ),
    ),
    (
        "978-9956",
        "Cameroon",
        (
            ("0000000-0999999", 1),
            ("1000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9957",
        "Jordan",
        (
            ("0000000-3999999", 2),
            ("4000000-6499999", 3),
            ("6500000-6799999", 2),
            ("6800000-6999999", 3),
            ("7000000-8499999", 2),
            ("8500000-8799999", 4),
            ("8800000-9999999", 2),
        ),
    ),
    (
        "978-9958",
        "Bosnia and Herzegovina",
        (
            ("0000000-0199999", 2),
            ("0200000-0299999", 3),
            ("0300000-0399999", 4),
            ("0400000-0899999", 3),
            ("0900000-0999999", 4),
            ("1000000-1899999", 2),
            ("1900000-1999999", 4),
            ("2000000-4999999", 2),
            ("5000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9959",
        "Libya",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9499999", 3),
            ("9500000-9699999", 4),
            ("9700000-9799999", 3),
            ("9800000-9999999", 2),
        ),
    ),
    (
        "978-9960",
        "Saudi Arabia",
        (
            ("0000000-5999999", 2),
            ("6000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9961",
        "Algeria",
        (
            ("0000000-2999999", 1),
            ("3000000-6999999", 2),
            ("7000000-9499999", 3),
            ("9500000-9999999", 4),
        ),
    ),
    (
        "978-9962",
        "Panama",
        (
            ("0000000-5499999", 2),
            ("5500000-5599999", 4),
            ("5600000-5999999", 2),
            ("6000000-8499999", 3),
            ("8500000-9999999", 4),
        ),
    ),
    (
        "978-9963",
        "Cyprus",
        (
            ("0000000-1999999", 1),
            ("2000000-2499999", 4),
            ("2500000-2799999", 3),
            ("2800000-2999999", 4),
            ("3000000-5499999", 2),
            ("5500000-7349999", 3),
            ("7350000-9999999", 4),
        ),
    ),
    (
        "978-9964",
        "Ghana",
        (
            ("0000000-6999999", 1),
            ("7000000-9499999", 2),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-9965",
        "Kazakhstan",
        (
            ("0000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9966",
        "Kenya",
        (
            ("0000000-1399999", 3),
            ("1400000-1499999", 2),
            ("1500000-1999999", 4),
            ("2000000-6999999", 2),
            ("7000000-7499999", 4),
            ("7500000-8209999", 3),
            ("8210000-8249999", 4),
            ("8250000-8259999", 3),
            ("8260000-8289999", 4),
            ("8290000-9599999", 3),
            ("9600000-9999999", 4),
        ),
    ),
    (
        "978-9967",
        "Kyrgyz Republic",
        (
            ("0000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9968",
        "Costa Rica",
        (
            ("0000000-4999999", 2),
            ("5000000-9399999", 3),
            ("9400000-9999999", 4),
        ),
    ),
    (
        "978-9970",
        "Uganda",
        (
            ("0000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9971",
        "Singapore",
        (
            ("0000000-5999999", 1),
            ("6000000-8999999", 2),
            ("9000000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9972",
        "Peru",
        (
            ("0000000-0999999", 2),
            ("1000000-1999999", 1),
            ("2000000-2499999", 3),
            ("2500000-2999999", 4),
            ("3000000-5999999", 2),
            ("6000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9973",
        "Tunisia",
        (
            ("0000000-0599999", 2),
            ("0600000-0899999", 3),
            ("0900000-0999999", 4),
            ("1000000-6999999", 2),
            ("7000000-9699999", 3),
            ("9700000-9999999", 4),
        ),
    ),
    (
        "978-9974",
        "Uruguay",
        (
            ("0000000-2999999", 1),
            ("3000000-5499999", 2),
            ("5500000-7499999", 3),
            ("7500000-9099999", 4),
            ("9100000-9499999", 3),
            ("9500000-9999999", 2),
        ),
    ),
    (
        "978-9975",
        "Moldova",
        (
            ("0000000-0999999", 1),
            ("1000000-2999999", 3),
            ("3000000-4499999", 4),
            ("4500000-8999999", 2),
            ("9000000-9499999", 3),
            ("9500000-9999999", 4),
        ),
    ),
    (
        "978-9976",
        "Tanzania",
        (
            ("0000000-4999999", 1),
            ("5000000-5899999", 4),
            ("5900000-8999999", 2),
            ("9000000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9977",
        "Costa Rica",
        (
            ("0000000-8999999", 2),
            ("9000000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9978",
        "Ecuador",
        (
            ("0000000-2999999", 2),
            ("3000000-3999999", 3),
            ("4000000-9499999", 2),
            ("9500000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9979",
        "Iceland",
        (
            ("0000000-4999999", 1),
            ("5000000-6499999", 2),
            ("6500000-6599999", 3),
            ("6600000-7599999", 2),
            ("7600000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9980",
        "Papua New Guinea",
        (
            ("0000000-3999999", 1),
            ("4000000-8999999", 2),
            ("9000000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9981",
        "Morocco",
        (
            ("0000000-0999999", 2),
            ("1000000-1599999", 3),
            ("1600000-1999999", 4),
            ("2000000-7999999", 2),
            ("8000000-9499999", 3),
            ("9500000-9999999", 4),
        ),
    ),
    (
        "978-9982",
        "Zambia",
        (
            ("0000000-7999999", 2),
            ("8000000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9983",
        "Gambia",
        (
            ("0000000-7999999", 0),
            ("8000000-9499999", 2),
            ("9500000-9899999", 3),
            ("9900000-9999999", 4),
        ),
    ),
    (
        "978-9984",
        "Latvia",
        (
            ("0000000-4999999", 2),
            ("5000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9985",
        "Estonia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-8999999", 3),
            ("9000000-9999999", 4),
        ),
    ),
    (
        "978-9986",
        "Lithuania",
        (
            ("0000000-3999999", 2),
            ("4000000-8999999", 3),
            ("9000000-9399999", 4),
            ("9400000-9699999", 3),
            ("9700000-9999999", 2),
        ),
    ),
    (
        "978-9987",
        "Tanzania",
        (
            ("0000000-3999999", 2),
            ("4000000-8799999", 3),
            ("8800000-9999999", 4),
        ),
    ),
    (
        "978-9988",
        "Ghana",
        (
            ("0000000-3999999", 1),
            ("4000000-5499999", 2),
            ("5500000-7499999", 3),
            ("7500000-9999999", 4),
        ),
    ),
    (
        "978-9989",
        "North Macedonia",
        (
            ("0000000-0999999", 1),
            ("1000000-1999999", 3),
            ("2000000-2099999", 4),
            ("2100000-2999999", 2),
            ("3000000-5999999", 3),
            ("6000000-9499999", 4),
            ("9500000-9999999", 2),
        ),
    ),
    (
        "978-99901",
        "Bahrain",
        (
            ("0000000-4999999", 2),
            ("5000000-7999999", 3),
            ("8000000-9999999", 2),
        ),
    ),
    (
        "978-99903",
        "Mauritius",
        (
            ("0000000-1999999", 1),
            ("2000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99904",
        "Curaçao",
        (
            ("0000000-5999999", 1),
            ("6000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99905",
        "Bolivia",
        (
            ("0000000-3999999", 1),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99906",
        "Kuwait",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-6999999", 3),
            ("7000000-9499999", 2),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99908",
        "Malawi",
        (
            ("0000000-0999999", 1),
            ("1000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99909",
        "Malta",
        (
            ("0000000-3999999", 1),
            ("4000000-9499999", 2),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99910",
        "Sierra Leone",
        (
            ("0000000-2999999", 1),
            ("3000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99911",
        "Lesotho",
        (
            ("0000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99912",
        "Botswana",
        (
            ("0000000-3999999", 1),
            ("4000000-5999999", 3),
            ("6000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99913",
        "Andorra",
        (
            ("0000000-2999999", 1),
            ("3000000-3599999", 2),
            ("3600000-5999999", 0),
            ("6000000-6049999", 3),
            ("6050000-9999999", 0),
        ),
    ),
    (
        "978-99914",
        "International NGO Publishers",
        (
            ("0000000-4999999", 1),
            ("5000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99915",
        "Maldives",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99916",
        "Namibia",
        (
            ("0000000-2999999", 1),
            ("3000000-6999999", 2),
            ("7000000-9999999", 3),
        ),
    ),
    (
        "978-99917",
        "Brunei Darussalam",
        (
            ("0000000-2999999", 1),
            ("3000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99918",
        "Faroe Islands",
        (
            ("0000000-3999999", 1),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99919",
        "Benin",
        (
            ("0000000-2999999", 1),
            ("3000000-3999999", 3),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99920",
        "Andorra",
        (
            ("0000000-4999999", 1),
            ("5000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99921",
        "Qatar",
        (
            ("0000000-1999999", 1),
            ("2000000-6999999", 2),
            ("7000000-7999999", 3),
            ("8000000-8999999", 1),
            ("9000000-9999999", 2),
        ),
    ),
    (
        "978-99922",
        "Guatemala",
        (
            ("0000000-3999999", 1),
            ("4000000-6999999", 2),
            ("7000000-9999999", 3),
        ),
    ),
    (
        "978-99923",
        "El Salvador",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99924",
        "Nicaragua",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99925",
        "Paraguay",
        (
            ("0000000-3999999", 1),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99926",
        "Honduras",
        (
            ("0000000-0999999", 1),
            ("1000000-5999999", 2),
            ("6000000-8699999", 3),
            ("8700000-9999999", 2),
        ),
    ),
    (
        "978-99927",
        "Albania",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99928",
        "Georgia",
        (
            ("0000000-0999999", 1),
            ("1000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99929",
        "Mongolia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99930",
        "Armenia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99931",
        "Seychelles",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99932",
        "Malta",
        (
            ("0000000-0999999", 1),
            ("1000000-5999999", 2),
            ("6000000-6999999", 3),
            ("7000000-7999999", 1),
            ("8000000-9999999", 2),
        ),
    ),
    (
        "978-99933",
        "Nepal",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99934",
        "Dominican Republic",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99935",
        "Haiti",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-6999999", 3),
            ("7000000-8999999", 1),
            ("9000000-9999999", 2),
        ),
    ),
    (
        "978-99936",
        "Bhutan",
        (
            ("0000000-0999999", 1),
            ("1000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99937",
        "Macau",
        (
            ("0000000-1999999", 1),
            ("2000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99938",
        "Srpska, Republic of",
        (
            ("0000000-1999999", 1),
            ("2000000-5999999", 2),
            ("6000000-8999999", 3),
            ("9000000-9999999", 2),
        ),
    ),
    (
        "978-99939",
        "Guatemala",
        (
            ("0000000-5999999", 1),
            ("6000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99940",
        "Georgia",
        (
            ("0000000-0999999", 1),
            ("1000000-6999999", 2),
            ("7000000-9999999", 3),
        ),
    ),
    (
        "978-99941",
        "Armenia",
        (
            ("0000000-2999999", 1),
            ("3000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99942",
        "Sudan",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99943",
        "Albania",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99944",
        "Ethiopia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99945",
        "Namibia",
        (
            ("0000000-5999999", 1),
            ("6000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99946",
        "Nepal",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99947",
        "Tajikistan",
        (
            ("0000000-2999999", 1),
            ("3000000-6999999", 2),
            ("7000000-9999999", 3),
        ),
    ),
    (
        "978-99948",
        "Eritrea",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99949",
        "Mauritius",
        (
            ("0000000-1999999", 1),
            ("2000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99950",
        "Cambodia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99952",
        "Mali",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99953",
        "Paraguay",
        (
            ("0000000-2999999", 1),
            ("3000000-7999999", 2),
            ("8000000-9399999", 3),
            ("9400000-9999999", 2),
        ),
    ),
    (
        "978-99954",
        "Bolivia",
        (
            ("0000000-2999999", 1),
            ("3000000-6999999", 2),
            ("7000000-8799999", 3),
            ("8800000-9999999", 2),
        ),
    ),
    (
        "978-99955",
        "Srpska, Republic of",
        (
            ("0000000-1999999", 1),
            ("2000000-5999999", 2),
            ("6000000-7999999", 3),
            ("8000000-9999999", 2),
        ),
    ),
    (
        "978-99956",
        "Albania",
        (
            ("0000000-5999999", 2),
            ("6000000-8599999", 3),
            ("8600000-9999999", 2),
        ),
    ),
    (
        "978-99957",
        "Malta",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99958",
        "Bahrain",
        (
            ("0000000-4999999", 1),
            ("5000000-9399999", 2),
            ("9400000-9999999", 3),
        ),
    ),
    (
        "978-99959",
        "Luxembourg",
        (
            ("0000000-2999999", 1),
            ("3000000-5999999", 2),
            ("6000000-9999999", 3),
        ),
    ),
    (
        "978-99960",
        "Malawi",
        (
            ("0000000-0999999", 1),
            ("1000000-9499999", 2),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99961",
        "El Salvador",
        (
            ("0000000-3999999", 1),
            ("4000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99962",
        "Mongolia",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99963",
        "Cambodia",
        (
            ("0000000-4999999", 2),
            ("5000000-9999999", 3),
        ),
    ),
    (
        "978-99964",
        "Nicaragua",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99965",
        "Macau",
        (
            ("0000000-3999999", 1),
            ("4000000-6299999", 2),
            ("6300000-9999999", 3),
        ),
    ),
    (
        "978-99966",
        "Kuwait",
        (
            ("0000000-2999999", 1),
            ("3000000-6999999", 2),
            ("7000000-7999999", 3),
            ("8000000-9999999", 2),
        ),
    ),
    (
        "978-99967",
        "Paraguay",
        (
            ("0000000-1999999", 1),
            ("2000000-5999999", 2),
            ("6000000-8999999", 3),
            ("9000000-9999999", 2),
        ),
    ),
    (
        "978-99968",
        "Botswana",
        (
            ("0000000-3999999", 1),
            ("4000000-5999999", 3),
            ("6000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99969",
        "Oman",
        (
            ("0000000-4999999", 1),
            ("5000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99970",
        "Haiti",
        (
            ("0000000-4999999", 1),
            ("5000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99971",
        "Myanmar",
        (
            ("0000000-3999999", 1),
            ("4000000-8499999", 2),
            ("8500000-9999999", 3),
        ),
    ),
    (
        "978-99972",
        "Faroe Islands",
        (
            ("0000000-4999999", 1),
            ("5000000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99973",
        "Mongolia",
        (
            ("0000000-3999999", 1),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99974",
        "Bolivia",
        (
            ("0000000-0999999", 1),
            ("1000000-2599999", 2),
            ("2600000-3999999", 3),
            ("4000000-6399999", 2),
            ("6400000-6499999", 3),
            ("6500000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99975",
        "Tajikistan",
        (
            ("0000000-2999999", 1),
            ("3000000-3999999", 3),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99976",
        "Srpska, Republic of",
        (
            ("0000000-0999999", 1),
            ("1000000-1599999", 2),
            ("1600000-1999999", 3),
            ("2000000-5999999", 2),
            ("6000000-8199999", 3),
            ("8200000-8999999", 2),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99977",
        "Rwanda",
        (
            ("0000000-1999999", 1),
            ("2000000-3999999", 0),
            ("4000000-6999999", 2),
            ("7000000-7999999", 3),
            ("8000000-9749999", 0),
            ("9750000-9999999", 3),
        ),
    ),
    (
        "978-99978",
        "Mongolia",
        (
            ("0000000-4999999", 1),
            ("5000000-6999999", 2),
            ("7000000-9999999", 3),
        ),
    ),
    (
        "978-99979",
        "Honduras",
        (
            ("0000000-3999999", 1),
            ("4000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99980",
        "Bhutan",
        (
            ("0000000-0999999", 1),
            ("1000000-2999999", 0),
            ("3000000-5999999", 2),
            ("6000000-7499999", 0),
            ("7500000-9999999", 3),
        ),
    ),
    (
        "978-99981",
        "Macau",
        (
            ("0000000-1999999", 1),
            ("2000000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99982",
        "Benin",
        (
            ("0000000-1999999", 1),
            ("2000000-4999999", 0),
            ("5000000-6899999", 2),
            ("6900000-8999999", 0),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99983",
        "El Salvador",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-6999999", 2),
            ("7000000-9499999", 0),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99984",
        "Brunei Darussalam",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-6999999", 2),
            ("7000000-9499999", 0),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99985",
        "Tajikistan",
        (
            ("0000000-1999999", 1),
            ("2000000-2499999", 0),
            ("2500000-7999999", 2),
            ("8000000-9999999", 3),
        ),
    ),
    (
        "978-99986",
        "Myanmar",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-6999999", 2),
            ("7000000-9499999", 0),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99987",
        "Luxembourg",
        (
            ("0000000-6999999", 0),
            ("7000000-9999999", 3),
        ),
    ),
    (
        "978-99988",
        "Sudan",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-5499999", 2),
            ("5500000-7999999", 0),
            ("8000000-8249999", 3),
            ("8250000-9999999", 0),
        ),
    ),
    (
        "978-99989",
        "Paraguay",
        (
            ("0000000-1999999", 1),
            ("2000000-4999999", 0),
            ("5000000-7999999", 2),
            ("8000000-8999999", 0),
            ("9000000-9999999", 3),
        ),
    ),
    (
        "978-99990",
        "Ethiopia",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-5799999", 2),
            ("5800000-9599999", 0),
            ("9600000-9999999", 3),
        ),
    ),
    (
        "978-99992",
        "Oman",
        (
            ("0000000-1999999", 1),
            ("2000000-4999999", 0),
            ("5000000-6499999", 2),
            ("6500000-9499999", 0),
            ("9500000-9999999", 3),
        ),
    ),
    (
        "978-99993",
        "Mauritius",
        (
            ("0000000-2999999", 1),
            ("3000000-4999999", 0),
            ("5000000-5499999", 2),
            ("5500000-9799999", 0),
            ("9800000-9999999", 3),
        ),
    ),
    (
        "978-99994",
        "Haiti",
        (
            ("0000000-0999999", 1),
            ("1000000-4999999", 0),
            ("5000000-5299999", 2),
            ("5300000-9849999", 0),
            ("9850000-9999999", 3),
        ),
    ),
    (
        "978-99995",
        "Seychelles",
        (
            ("0000000-4999999", 0),
            ("5000000-5299999", 2),
            ("5300000-9749999", 0),
            ("9750000-9999999", 3),
        ),
    ),
    (
        "979-10",
        "France",
        (
            ("0000000-1999999", 2),
            ("2000000-6999999", 3),
            ("7000000-8999999", 4),
            ("9000000-9759999", 5),
            ("9760000-9999999", 6),
        ),
    ),
    (
        "979-11",
        "Korea, Republic",
        (
            ("0000000-2499999", 2),
            ("2500000-5499999", 3),
            ("5500000-8499999", 4),
            ("8500000-9499999", 5),
            ("9500000-9999999", 6),
        ),
    ),
    (
        "979-12",
        "Italy",
        (
            ("0000000-1999999", 0),
            ("2000000-2999999", 3),
            ("3000000-5449999", 0),
            ("5450000-5999999", 4),
            ("6000000-7999999", 0),
            ("8000000-8499999", 5),
            ("8500000-9999999", 0),
        ),
    ),
    (
        "979-13",
        "Spain",
        (
            ("0000000-0099999", 2),
            ("0100000-5999999", 0),
            ("6000000-6049999", 3),
            ("6050000-7749999", 0),
            ("7750000-7999999", 4),
            ("8000000-8499999", 0),
            ("8500000-8999999", 5),
            ("9000000-9999999", 0),
        ),
    ),
    (
        "979-8",
        "United States",
        (
            ("0000000-1999999", 0),
            ("2000000-2299999", 3),
            ("2300000-3499999", 0),
            ("3500000-8499999", 4),
            ("8500000-8849999", 5),
            ("8850000-8999999", 0),
            ("9000000-9849999", 6),
            ("9850000-9999999", 7),
        ),
    ),
)
