"""Registration groups of the International ISBN Agency range message.

Generated from the ``RangeMessage.xml`` export; do not edit by hand.

Message source: International ISBN Agency
Message date: Tue, 16 Nov 2021 11:36:02 GMT

Rules keep the order they are declared in within the message. Range bounds are
the declared bounds cut to the rule length and are matched as half-open
intervals. Rules of zero length (ranges not defined for use) are omitted.
"""

from isbnparts.groups import RangeRule, RegistrationGroup


#: Registration groups in the order they are declared in the range message.
REGISTRATION_GROUPS: tuple[RegistrationGroup, ...] = (
    RegistrationGroup(
        prefix=978,
        group=0,
        name="English language",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 227, 3),
            RangeRule(2280, 2289, 4),
            RangeRule(229, 368, 3),
            RangeRule(3690, 3699, 4),
            RangeRule(370, 638, 3),
            RangeRule(6390, 6397, 4),
            RangeRule(6398000, 6399999, 7),
            RangeRule(640, 644, 3),
            RangeRule(6450000, 6459999, 7),
            RangeRule(646, 647, 3),
            RangeRule(6480000, 6489999, 7),
            RangeRule(649, 654, 3),
            RangeRule(6550, 6559, 4),
            RangeRule(656, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 949999, 6),
            RangeRule(9500000, 9999999, 7),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=1,
        name="English language",
        rules=(
            RangeRule(0, 9, 3),
            RangeRule(1, 2, 2),
            RangeRule(30, 34, 3),
            RangeRule(350, 399, 4),
            RangeRule(4, 6, 2),
            RangeRule(700, 999, 4),
            RangeRule(100, 397, 3),
            RangeRule(3980, 5499, 4),
            RangeRule(55000, 64999, 5),
            RangeRule(6500, 6799, 4),
            RangeRule(68000, 68599, 5),
            RangeRule(6860, 7139, 4),
            RangeRule(714, 716, 3),
            RangeRule(7170, 7319, 4),
            RangeRule(7320000, 7399999, 7),
            RangeRule(74000, 77499, 5),
            RangeRule(7750000, 7753999, 7),
            RangeRule(77540, 77639, 5),
            RangeRule(7764000, 7764999, 7),
            RangeRule(77650, 77699, 5),
            RangeRule(7770000, 7782999, 7),
            RangeRule(77830, 78999, 5),
            RangeRule(7900, 7999, 4),
            RangeRule(80000, 80049, 5),
            RangeRule(80050, 80499, 5),
            RangeRule(80500, 83799, 5),
            RangeRule(8380000, 8384999, 7),
            RangeRule(83850, 86719, 5),
            RangeRule(8672, 8675, 4),
            RangeRule(86760, 86979, 5),
            RangeRule(869800, 915999, 6),
            RangeRule(9160000, 9165059, 7),
            RangeRule(916506, 916869, 6),
            RangeRule(9168700, 9169079, 7),
            RangeRule(916908, 919599, 6),
            RangeRule(9196000, 9196549, 7),
            RangeRule(919655, 972999, 6),
            RangeRule(9730, 9877, 4),
            RangeRule(987800, 991149, 6),
            RangeRule(9911500, 9911999, 7),
            RangeRule(991200, 998989, 6),
            RangeRule(9989900, 9999999, 7),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=2,
        name="French language",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 349, 3),
            RangeRule(35000, 39999, 5),
            RangeRule(400, 489, 3),
            RangeRule(490000, 494999, 6),
            RangeRule(495, 495, 3),
            RangeRule(4960, 4966, 4),
            RangeRule(49670, 49699, 5),
            RangeRule(497, 699, 3),
            RangeRule(7000, 8399, 4),
            RangeRule(84000, 89999, 5),
            RangeRule(900000, 919799, 6),
            RangeRule(91980, 91980, 5),
            RangeRule(919810, 919942, 6),
            RangeRule(9199430, 9199689, 7),
            RangeRule(919969, 949999, 6),
            RangeRule(9500000, 9999999, 7),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=3,
        name="German language",
        rules=(
            RangeRule(0, 2, 2),
            RangeRule(30, 33, 3),
            RangeRule(340, 369, 4),
            RangeRule(3700, 3999, 5),
            RangeRule(4, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 949999, 6),
            RangeRule(9500000, 9539999, 7),
            RangeRule(95400, 96999, 5),
            RangeRule(9700000, 9849999, 7),
            RangeRule(98500, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=4,
        name="Japan",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 949999, 6),
            RangeRule(9500000, 9999999, 7),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=5,
        name="former U.S.S.R",
        rules=(
            RangeRule(0, 499, 5),
            RangeRule(50, 99, 4),
            RangeRule(1, 19, 2),
            RangeRule(200, 420, 3),
            RangeRule(4210, 4299, 4),
            RangeRule(430, 430, 3),
            RangeRule(4310, 4399, 4),
            RangeRule(440, 440, 3),
            RangeRule(4410, 4499, 4),
            RangeRule(450, 603, 3),
            RangeRule(6040000, 6049999, 7),
            RangeRule(605, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 909999, 6),
            RangeRule(91000, 91999, 5),
            RangeRule(9200, 9299, 4),
            RangeRule(93000, 94999, 5),
            RangeRule(9500000, 9500999, 7),
            RangeRule(9501, 9799, 4),
            RangeRule(98000, 98999, 5),
            RangeRule(9900000, 9909999, 7),
            RangeRule(9910, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=600,
        name="Iran",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 499, 3),
            RangeRule(5000, 8999, 4),
            RangeRule(90000, 98679, 5),
            RangeRule(9868, 9929, 4),
            RangeRule(993, 995, 3),
            RangeRule(99600, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=601,
        name="Kazakhstan",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 7999, 4),
            RangeRule(80000, 84999, 5),
            RangeRule(85, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=602,
        name="Indonesia",
        rules=(
            RangeRule(0, 6, 2),
            RangeRule(700, 1399, 4),
            RangeRule(14000, 14999, 5),
            RangeRule(1500, 1699, 4),
            RangeRule(17000, 19999, 5),
            RangeRule(200, 499, 3),
            RangeRule(50000, 53999, 5),
            RangeRule(5400, 5999, 4),
            RangeRule(60000, 61999, 5),
            RangeRule(6200, 6999, 4),
            RangeRule(70000, 74999, 5),
            RangeRule(7500, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=603,
        name="Saudi Arabia",
        rules=(
            RangeRule(0, 4, 2),
            RangeRule(5, 49, 2),
            RangeRule(500, 799, 3),
            RangeRule(8000, 8999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=604,
        name="Vietnam",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 89, 2),
            RangeRule(900, 979, 3),
            RangeRule(9800, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=605,
        name="Turkey",
        rules=(
            RangeRule(0, 2, 2),
            RangeRule(30, 39, 3),
            RangeRule(4, 5, 2),
            RangeRule(6000, 6999, 5),
            RangeRule(7, 9, 2),
            RangeRule(100, 199, 3),
            RangeRule(2000, 2399, 4),
            RangeRule(240, 399, 3),
            RangeRule(4000, 5999, 4),
            RangeRule(60000, 74999, 5),
            RangeRule(7500, 7999, 4),
            RangeRule(80000, 89999, 5),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=606,
        name="Romania",
        rules=(
            RangeRule(0, 99, 3),
            RangeRule(10, 49, 2),
            RangeRule(500, 799, 3),
            RangeRule(8000, 9099, 4),
            RangeRule(910, 919, 3),
            RangeRule(92000, 95999, 5),
            RangeRule(9600, 9749, 4),
            RangeRule(975, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=607,
        name="Mexico",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 749, 3),
            RangeRule(7500, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=608,
        name="North Macedonia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 19, 2),
            RangeRule(200, 449, 3),
            RangeRule(4500, 6499, 4),
            RangeRule(65000, 69999, 5),
            RangeRule(7, 9, 1),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=609,
        name="Lithuania",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=612,
        name="Peru",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(300, 399, 3),
            RangeRule(4000, 4499, 4),
            RangeRule(45000, 49999, 5),
            RangeRule(5000, 5149, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=613,
        name="Mauritius",
        rules=(
            RangeRule(0, 9, 1),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=614,
        name="Lebanon",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=615,
        name="Hungary",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 499, 3),
            RangeRule(5000, 7999, 4),
            RangeRule(80000, 89999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=616,
        name="Thailand",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=617,
        name="Ukraine",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 699, 3),
            RangeRule(7000, 8999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=618,
        name="Greece",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 499, 3),
            RangeRule(5000, 7999, 4),
            RangeRule(80000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=619,
        name="Bulgaria",
        rules=(
            RangeRule(0, 14, 2),
            RangeRule(150, 699, 3),
            RangeRule(7000, 8999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=620,
        name="Mauritius",
        rules=(
            RangeRule(0, 9, 1),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=621,
        name="Philippines",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(400, 599, 3),
            RangeRule(8000, 8999, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=622,
        name="Iran",
        rules=(
            RangeRule(0, 10, 2),
            RangeRule(200, 324, 3),
            RangeRule(5650, 7999, 4),
            RangeRule(94000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=623,
        name="Indonesia",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(200, 499, 3),
            RangeRule(5500, 7999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=624,
        name="Sri Lanka",
        rules=(
            RangeRule(0, 4, 2),
            RangeRule(200, 249, 3),
            RangeRule(5000, 6249, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=625,
        name="Turkey",
        rules=(
            RangeRule(0, 0, 2),
            RangeRule(400, 442, 3),
            RangeRule(44300, 44499, 5),
            RangeRule(445, 449, 3),
            RangeRule(7000, 7793, 4),
            RangeRule(77940, 77949, 5),
            RangeRule(7795, 8499, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=626,
        name="Taiwan",
        rules=(
            RangeRule(0, 4, 2),
            RangeRule(300, 499, 3),
            RangeRule(7000, 7999, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=627,
        name="Pakistan",
        rules=(
            RangeRule(30, 31, 2),
            RangeRule(500, 524, 3),
            RangeRule(7500, 7999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=628,
        name="Colombia",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(500, 549, 3),
            RangeRule(7500, 8499, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=65,
        name="Brazil",
        rules=(
            RangeRule(0, 1, 2),
            RangeRule(250, 299, 3),
            RangeRule(300, 302, 3),
            RangeRule(5000, 5129, 4),
            RangeRule(5350, 5999, 4),
            RangeRule(80000, 81824, 5),
            RangeRule(84500, 89999, 5),
            RangeRule(900000, 902449, 6),
            RangeRule(990000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=7,
        name="China, People's Republic",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 499, 3),
            RangeRule(5000, 7999, 4),
            RangeRule(80000, 89999, 5),
            RangeRule(900000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=80,
        name="former Czechoslovakia",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 998999, 6),
            RangeRule(99900, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=81,
        name="India",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=82,
        name="Norway",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 689, 3),
            RangeRule(690000, 699999, 6),
            RangeRule(7000, 8999, 4),
            RangeRule(90000, 98999, 5),
            RangeRule(990000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=83,
        name="Poland",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 599, 3),
            RangeRule(60000, 69999, 5),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=84,
        name="Spain",
        rules=(
            RangeRule(0, 10, 2),
            RangeRule(1100, 1199, 4),
            RangeRule(120000, 129999, 6),
            RangeRule(1300, 1399, 4),
            RangeRule(140, 149, 3),
            RangeRule(15000, 19999, 5),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(9000, 9199, 4),
            RangeRule(920000, 923999, 6),
            RangeRule(92400, 92999, 5),
            RangeRule(930000, 949999, 6),
            RangeRule(95000, 96999, 5),
            RangeRule(9700, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=85,
        name="Brazil",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 454, 3),
            RangeRule(455000, 455299, 6),
            RangeRule(45530, 45599, 5),
            RangeRule(456, 528, 3),
            RangeRule(52900, 53199, 5),
            RangeRule(5320, 5339, 4),
            RangeRule(534, 539, 3),
            RangeRule(54000, 54029, 5),
            RangeRule(54030, 54039, 5),
            RangeRule(540400, 540499, 6),
            RangeRule(54050, 54089, 5),
            RangeRule(540900, 540999, 6),
            RangeRule(54100, 54399, 5),
            RangeRule(5440, 5479, 4),
            RangeRule(54800, 54999, 5),
            RangeRule(5500, 5999, 4),
            RangeRule(60000, 69999, 5),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 924999, 6),
            RangeRule(92500, 94499, 5),
            RangeRule(9450, 9599, 4),
            RangeRule(96, 97, 2),
            RangeRule(98000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=86,
        name="former Yugoslavia",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(300, 599, 3),
            RangeRule(6000, 7999, 4),
            RangeRule(80000, 89999, 5),
            RangeRule(900000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=87,
        name="Denmark",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(400, 649, 3),
            RangeRule(7000, 7999, 4),
            RangeRule(85000, 94999, 5),
            RangeRule(970000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=88,
        name="Italy",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 311, 3),
            RangeRule(31200, 31499, 5),
            RangeRule(315, 318, 3),
            RangeRule(31900, 32299, 5),
            RangeRule(323, 326, 3),
            RangeRule(3270, 3389, 4),
            RangeRule(339, 360, 3),
            RangeRule(3610, 3629, 4),
            RangeRule(363, 548, 3),
            RangeRule(5490, 5549, 4),
            RangeRule(555, 599, 3),
            RangeRule(6000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(900000, 909999, 6),
            RangeRule(910, 926, 3),
            RangeRule(9270, 9399, 4),
            RangeRule(940000, 947999, 6),
            RangeRule(94800, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=89,
        name="Korea, Republic",
        rules=(
            RangeRule(0, 24, 2),
            RangeRule(250, 549, 3),
            RangeRule(5500, 8499, 4),
            RangeRule(85000, 94999, 5),
            RangeRule(950000, 969999, 6),
            RangeRule(97000, 98999, 5),
            RangeRule(990, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=90,
        name="Netherlands",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 499, 3),
            RangeRule(5000, 6999, 4),
            RangeRule(70000, 79999, 5),
            RangeRule(800000, 849999, 6),
            RangeRule(8500, 8999, 4),
            RangeRule(90, 90, 2),
            RangeRule(94, 94, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=91,
        name="Sweden",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 49, 2),
            RangeRule(500, 649, 3),
            RangeRule(7000, 8199, 4),
            RangeRule(85000, 94999, 5),
            RangeRule(970000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=92,
        name="International NGO Publishers and EU Organizations",
        rules=(
            RangeRule(0, 5, 1),
            RangeRule(60, 79, 2),
            RangeRule(800, 899, 3),
            RangeRule(9000, 9499, 4),
            RangeRule(95000, 98999, 5),
            RangeRule(990000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=93,
        name="India",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 499, 3),
            RangeRule(5000, 7999, 4),
            RangeRule(80000, 94999, 5),
            RangeRule(950000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=94,
        name="Netherlands",
        rules=(
            RangeRule(0, 599, 3),
            RangeRule(6000, 8999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=950,
        name="Argentina",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 899, 3),
            RangeRule(9000, 9899, 4),
            RangeRule(99000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=951,
        name="Finland",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 54, 2),
            RangeRule(550, 889, 3),
            RangeRule(8900, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=952,
        name="Finland",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 499, 3),
            RangeRule(5000, 5999, 4),
            RangeRule(60, 65, 2),
            RangeRule(6600, 6699, 4),
            RangeRule(67000, 69999, 5),
            RangeRule(7000, 7999, 4),
            RangeRule(80, 94, 2),
            RangeRule(9500, 9899, 4),
            RangeRule(99000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=953,
        name="Croatia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 14, 2),
            RangeRule(150, 479, 3),
            RangeRule(48000, 49999, 5),
            RangeRule(500, 500, 3),
            RangeRule(50100, 50999, 5),
            RangeRule(51, 54, 2),
            RangeRule(55000, 59999, 5),
            RangeRule(6000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=954,
        name="Bulgaria",
        rules=(
            RangeRule(0, 28, 2),
            RangeRule(2900, 2999, 4),
            RangeRule(300, 799, 3),
            RangeRule(8000, 8999, 4),
            RangeRule(90000, 92999, 5),
            RangeRule(9300, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=955,
        name="Sri Lanka",
        rules=(
            RangeRule(0, 1999, 4),
            RangeRule(20, 33, 2),
            RangeRule(3400, 3549, 4),
            RangeRule(35500, 35999, 5),
            RangeRule(3600, 3799, 4),
            RangeRule(38000, 38999, 5),
            RangeRule(3900, 4099, 4),
            RangeRule(41000, 44999, 5),
            RangeRule(4500, 4999, 4),
            RangeRule(50000, 54999, 5),
            RangeRule(550, 710, 3),
            RangeRule(71100, 71499, 5),
            RangeRule(7150, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=956,
        name="Chile",
        rules=(
            RangeRule(0, 8, 2),
            RangeRule(9000, 9999, 5),
            RangeRule(10, 19, 2),
            RangeRule(200, 599, 3),
            RangeRule(6000, 6999, 4),
            RangeRule(7000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=957,
        name="Taiwan",
        rules=(
            RangeRule(0, 2, 2),
            RangeRule(300, 499, 4),
            RangeRule(5, 19, 2),
            RangeRule(2000, 2099, 4),
            RangeRule(21, 27, 2),
            RangeRule(28000, 30999, 5),
            RangeRule(31, 43, 2),
            RangeRule(440, 819, 3),
            RangeRule(8200, 9699, 4),
            RangeRule(97000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=958,
        name="Colombia",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 509, 3),
            RangeRule(5100, 5199, 4),
            RangeRule(52000, 53999, 5),
            RangeRule(5400, 5599, 4),
            RangeRule(56000, 59999, 5),
            RangeRule(600, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=959,
        name="Cuba",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=960,
        name="Greece",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 659, 3),
            RangeRule(6600, 6899, 4),
            RangeRule(690, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 92999, 5),
            RangeRule(93, 93, 2),
            RangeRule(9400, 9799, 4),
            RangeRule(98000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=961,
        name="Slovenia",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 599, 3),
            RangeRule(6000, 8999, 4),
            RangeRule(90000, 95999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=962,
        name="Hong Kong, China",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 86999, 5),
            RangeRule(8700, 8999, 4),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=963,
        name="Hungary",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=964,
        name="Iran",
        rules=(
            RangeRule(0, 14, 2),
            RangeRule(150, 249, 3),
            RangeRule(2500, 2999, 4),
            RangeRule(300, 549, 3),
            RangeRule(5500, 8999, 4),
            RangeRule(90000, 96999, 5),
            RangeRule(970, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=965,
        name="Israel",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 599, 3),
            RangeRule(7000, 7999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=966,
        name="Ukraine",
        rules=(
            RangeRule(0, 12, 2),
            RangeRule(130, 139, 3),
            RangeRule(14, 14, 2),
            RangeRule(1500, 1699, 4),
            RangeRule(170, 199, 3),
            RangeRule(2000, 2789, 4),
            RangeRule(279, 289, 3),
            RangeRule(2900, 2999, 4),
            RangeRule(300, 699, 3),
            RangeRule(7000, 8999, 4),
            RangeRule(90000, 90999, 5),
            RangeRule(910, 949, 3),
            RangeRule(95000, 97999, 5),
            RangeRule(980, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=967,
        name="Malaysia",
        rules=(
            RangeRule(0, 0, 2),
            RangeRule(100, 999, 4),
            RangeRule(10000, 19999, 5),
            RangeRule(2000, 2499, 4),
            RangeRule(250, 254, 3),
            RangeRule(25500, 26999, 5),
            RangeRule(2700, 2799, 4),
            RangeRule(2800, 2999, 4),
            RangeRule(300, 499, 3),
            RangeRule(5000, 5999, 4),
            RangeRule(60, 89, 2),
            RangeRule(900, 989, 3),
            RangeRule(9900, 9989, 4),
            RangeRule(99900, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=968,
        name="Mexico",
        rules=(
            RangeRule(1, 39, 2),
            RangeRule(400, 499, 3),
            RangeRule(5000, 7999, 4),
            RangeRule(800, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=969,
        name="Pakistan",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 20, 2),
            RangeRule(210, 219, 3),
            RangeRule(2200, 2299, 4),
            RangeRule(23000, 23999, 5),
            RangeRule(24, 39, 2),
            RangeRule(400, 749, 3),
            RangeRule(7500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=970,
        name="Mexico",
        rules=(
            RangeRule(1, 59, 2),
            RangeRule(600, 899, 3),
            RangeRule(9000, 9099, 4),
            RangeRule(91000, 96999, 5),
            RangeRule(9700, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=971,
        name="Philippines",
        rules=(
            RangeRule(0, 15, 3),
            RangeRule(160, 199, 4),
            RangeRule(2, 2, 2),
            RangeRule(300, 599, 4),
            RangeRule(6, 49, 2),
            RangeRule(500, 849, 3),
            RangeRule(8500, 9099, 4),
            RangeRule(91000, 95999, 5),
            RangeRule(9600, 9699, 4),
            RangeRule(97, 98, 2),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=972,
        name="Portugal",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 54, 2),
            RangeRule(550, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=973,
        name="Romania",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(100, 169, 3),
            RangeRule(1700, 1999, 4),
            RangeRule(20, 54, 2),
            RangeRule(550, 759, 3),
            RangeRule(7600, 8499, 4),
            RangeRule(85000, 88999, 5),
            RangeRule(8900, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=974,
        name="Thailand",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8499, 4),
            RangeRule(85000, 89999, 5),
            RangeRule(90000, 94999, 5),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=975,
        name="Turkey",
        rules=(
            RangeRule(0, 1999, 5),
            RangeRule(2, 23, 2),
            RangeRule(2400, 2499, 4),
            RangeRule(250, 599, 3),
            RangeRule(6000, 9199, 4),
            RangeRule(92000, 98999, 5),
            RangeRule(990, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=976,
        name="Caribbean Community",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 59, 2),
            RangeRule(600, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=977,
        name="Egypt",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 499, 3),
            RangeRule(5000, 6999, 4),
            RangeRule(700, 849, 3),
            RangeRule(85000, 89999, 5),
            RangeRule(90, 98, 2),
            RangeRule(990, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=978,
        name="Nigeria",
        rules=(
            RangeRule(0, 199, 3),
            RangeRule(2000, 2999, 4),
            RangeRule(30000, 79999, 5),
            RangeRule(8000, 8999, 4),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=979,
        name="Indonesia",
        rules=(
            RangeRule(0, 99, 3),
            RangeRule(1000, 1499, 4),
            RangeRule(15000, 19999, 5),
            RangeRule(20, 29, 2),
            RangeRule(3000, 3999, 4),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=980,
        name="Venezuela",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 599, 3),
            RangeRule(6000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=981,
        name="Singapore",
        rules=(
            RangeRule(0, 16, 2),
            RangeRule(17000, 17999, 5),
            RangeRule(18, 19, 2),
            RangeRule(200, 299, 3),
            RangeRule(3000, 3099, 4),
            RangeRule(310, 399, 3),
            RangeRule(4000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=982,
        name="South Pacific",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 699, 3),
            RangeRule(70, 89, 2),
            RangeRule(9000, 9799, 4),
            RangeRule(98000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=983,
        name="Malaysia",
        rules=(
            RangeRule(0, 1, 2),
            RangeRule(20, 199, 3),
            RangeRule(2000, 3999, 4),
            RangeRule(40000, 44999, 5),
            RangeRule(45, 49, 2),
            RangeRule(50, 79, 2),
            RangeRule(800, 899, 3),
            RangeRule(9000, 9899, 4),
            RangeRule(99000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=984,
        name="Bangladesh",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 8999, 4),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=985,
        name="Belarus",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 599, 3),
            RangeRule(6000, 8799, 4),
            RangeRule(880, 899, 3),
            RangeRule(90000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=986,
        name="Taiwan",
        rules=(
            RangeRule(0, 5, 2),
            RangeRule(6000, 6999, 5),
            RangeRule(700, 799, 4),
            RangeRule(8, 11, 2),
            RangeRule(120, 539, 3),
            RangeRule(5400, 7999, 4),
            RangeRule(80000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=987,
        name="Argentina",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(1000, 1999, 4),
            RangeRule(20000, 29999, 5),
            RangeRule(30, 35, 2),
            RangeRule(3600, 4199, 4),
            RangeRule(42, 43, 2),
            RangeRule(4400, 4499, 4),
            RangeRule(45000, 48999, 5),
            RangeRule(4900, 4999, 4),
            RangeRule(500, 829, 3),
            RangeRule(8300, 8499, 4),
            RangeRule(85, 88, 2),
            RangeRule(8900, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=988,
        name="Hong Kong, China",
        rules=(
            RangeRule(0, 11, 2),
            RangeRule(12000, 19999, 5),
            RangeRule(200, 739, 3),
            RangeRule(74000, 76999, 5),
            RangeRule(77000, 79999, 5),
            RangeRule(8000, 9699, 4),
            RangeRule(97000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=989,
        name="Portugal",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 34, 2),
            RangeRule(35000, 36999, 5),
            RangeRule(37, 52, 2),
            RangeRule(53000, 54999, 5),
            RangeRule(550, 799, 3),
            RangeRule(8000, 9499, 4),
            RangeRule(95000, 99999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9912,
        name="Tanzania",
        rules=(
            RangeRule(40, 44, 2),
            RangeRule(750, 799, 3),
            RangeRule(9850, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9913,
        name="Uganda",
        rules=(
            RangeRule(0, 4, 2),
            RangeRule(600, 649, 3),
            RangeRule(9800, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9914,
        name="Kenya",
        rules=(
            RangeRule(40, 44, 2),
            RangeRule(700, 749, 3),
            RangeRule(9850, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9915,
        name="Uruguay",
        rules=(
            RangeRule(40, 59, 2),
            RangeRule(650, 799, 3),
            RangeRule(9300, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9916,
        name="Estonia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 39, 2),
            RangeRule(4, 4, 1),
            RangeRule(600, 749, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9917,
        name="Bolivia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(30, 34, 2),
            RangeRule(600, 699, 3),
            RangeRule(9800, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9918,
        name="Malta",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(20, 29, 2),
            RangeRule(600, 799, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9919,
        name="Mongolia",
        rules=(
            RangeRule(20, 27, 2),
            RangeRule(500, 599, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9920,
        name="Morocco",
        rules=(
            RangeRule(32, 39, 2),
            RangeRule(550, 799, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9921,
        name="Kuwait",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(30, 39, 2),
            RangeRule(700, 899, 3),
            RangeRule(9700, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9922,
        name="Iraq",
        rules=(
            RangeRule(20, 29, 2),
            RangeRule(600, 799, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9923,
        name="Jordan",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 49, 2),
            RangeRule(700, 899, 3),
            RangeRule(9700, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9924,
        name="Cambodia",
        rules=(
            RangeRule(30, 39, 2),
            RangeRule(500, 649, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9925,
        name="Cyprus",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 54, 2),
            RangeRule(550, 734, 3),
            RangeRule(7350, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9926,
        name="Bosnia and Herzegovina",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9927,
        name="Qatar",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 399, 3),
            RangeRule(4000, 4999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9928,
        name="Albania",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 399, 3),
            RangeRule(4000, 4999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9929,
        name="Guatemala",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 54, 2),
            RangeRule(550, 799, 3),
            RangeRule(8000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9930,
        name="Costa Rica",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 939, 3),
            RangeRule(9400, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9931,
        name="Algeria",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(300, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9932,
        name="Lao People's Democratic Republic",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 849, 3),
            RangeRule(8500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9933,
        name="Syria",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9934,
        name="Latvia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 49, 2),
            RangeRule(500, 799, 3),
            RangeRule(8000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9935,
        name="Iceland",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9936,
        name="Afghanistan",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9937,
        name="Nepal",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 49, 2),
            RangeRule(500, 799, 3),
            RangeRule(8000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9938,
        name="Tunisia",
        rules=(
            RangeRule(0, 79, 2),
            RangeRule(800, 949, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9939,
        name="Armenia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 899, 3),
            RangeRule(9000, 9799, 4),
            RangeRule(98, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9940,
        name="Montenegro",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 49, 2),
            RangeRule(500, 839, 3),
            RangeRule(84, 86, 2),
            RangeRule(8700, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9941,
        name="Georgia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8, 8, 1),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9942,
        name="Ecuador",
        rules=(
            RangeRule(0, 59, 2),
            RangeRule(600, 699, 3),
            RangeRule(7000, 7499, 4),
            RangeRule(750, 849, 3),
            RangeRule(8500, 8999, 4),
            RangeRule(900, 984, 3),
            RangeRule(9850, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9943,
        name="Uzbekistan",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(300, 399, 3),
            RangeRule(4000, 9749, 4),
            RangeRule(975, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9944,
        name="Turkey",
        rules=(
            RangeRule(0, 999, 4),
            RangeRule(100, 499, 3),
            RangeRule(5000, 5999, 4),
            RangeRule(60, 69, 2),
            RangeRule(700, 799, 3),
            RangeRule(80, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9945,
        name="Dominican Republic",
        rules=(
            RangeRule(0, 0, 2),
            RangeRule(10, 79, 3),
            RangeRule(8, 39, 2),
            RangeRule(400, 569, 3),
            RangeRule(57, 57, 2),
            RangeRule(580, 799, 3),
            RangeRule(80, 80, 2),
            RangeRule(810, 849, 3),
            RangeRule(8500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9946,
        name="Korea, P.D.R.",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9947,
        name="Algeria",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9948,
        name="United Arab Emirates",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 849, 3),
            RangeRule(8500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9949,
        name="Estonia",
        rules=(
            RangeRule(0, 8, 2),
            RangeRule(90, 99, 3),
            RangeRule(10, 39, 2),
            RangeRule(400, 699, 3),
            RangeRule(70, 71, 2),
            RangeRule(7200, 7499, 4),
            RangeRule(75, 89, 2),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9950,
        name="Palestine",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(300, 849, 3),
            RangeRule(8500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9951,
        name="Kosova",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 849, 3),
            RangeRule(8500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9952,
        name="Azerbaijan",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9953,
        name="Lebanon",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 39, 2),
            RangeRule(400, 599, 3),
            RangeRule(60, 89, 2),
            RangeRule(9000, 9299, 4),
            RangeRule(93, 96, 2),
            RangeRule(970, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9954,
        name="Morocco",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 39, 2),
            RangeRule(400, 799, 3),
            RangeRule(8000, 9899, 4),
            RangeRule(99, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9955,
        name="Lithuania",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 929, 3),
            RangeRule(9300, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9956,
        name="Cameroon",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9957,
        name="Jordan",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 649, 3),
            RangeRule(65, 67, 2),
            RangeRule(680, 699, 3),
            RangeRule(70, 84, 2),
            RangeRule(8500, 8799, 4),
            RangeRule(88, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9958,
        name="Bosnia and Herzegovina",
        rules=(
            RangeRule(0, 1, 2),
            RangeRule(20, 29, 3),
            RangeRule(300, 399, 4),
            RangeRule(40, 89, 3),
            RangeRule(900, 999, 4),
            RangeRule(10, 18, 2),
            RangeRule(1900, 1999, 4),
            RangeRule(20, 49, 2),
            RangeRule(500, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9959,
        name="Libya",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 949, 3),
            RangeRule(9500, 9699, 4),
            RangeRule(970, 979, 3),
            RangeRule(98, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9960,
        name="Saudi Arabia",
        rules=(
            RangeRule(0, 59, 2),
            RangeRule(600, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9961,
        name="Algeria",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 69, 2),
            RangeRule(700, 949, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9962,
        name="Panama",
        rules=(
            RangeRule(0, 54, 2),
            RangeRule(5500, 5599, 4),
            RangeRule(56, 59, 2),
            RangeRule(600, 849, 3),
            RangeRule(8500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9963,
        name="Cyprus",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(2000, 2499, 4),
            RangeRule(250, 279, 3),
            RangeRule(2800, 2999, 4),
            RangeRule(30, 54, 2),
            RangeRule(550, 734, 3),
            RangeRule(7350, 7499, 4),
            RangeRule(7500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9964,
        name="Ghana",
        rules=(
            RangeRule(0, 6, 1),
            RangeRule(70, 94, 2),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9965,
        name="Kazakhstan",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9966,
        name="Kenya",
        rules=(
            RangeRule(0, 139, 3),
            RangeRule(14, 14, 2),
            RangeRule(1500, 1999, 4),
            RangeRule(20, 69, 2),
            RangeRule(7000, 7499, 4),
            RangeRule(750, 820, 3),
            RangeRule(8210, 8249, 4),
            RangeRule(825, 825, 3),
            RangeRule(8260, 8289, 4),
            RangeRule(829, 959, 3),
            RangeRule(9600, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9967,
        name="Kyrgyz Republic",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9968,
        name="Costa Rica",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 939, 3),
            RangeRule(9400, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9970,
        name="Uganda",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9971,
        name="Singapore",
        rules=(
            RangeRule(0, 5, 1),
            RangeRule(60, 89, 2),
            RangeRule(900, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9972,
        name="Peru",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(1, 1, 1),
            RangeRule(200, 249, 3),
            RangeRule(2500, 2999, 4),
            RangeRule(30, 59, 2),
            RangeRule(600, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9973,
        name="Tunisia",
        rules=(
            RangeRule(0, 5, 2),
            RangeRule(60, 89, 3),
            RangeRule(900, 999, 4),
            RangeRule(10, 69, 2),
            RangeRule(700, 969, 3),
            RangeRule(9700, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9974,
        name="Uruguay",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 54, 2),
            RangeRule(550, 749, 3),
            RangeRule(7500, 8799, 4),
            RangeRule(880, 909, 3),
            RangeRule(91, 94, 2),
            RangeRule(95, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9975,
        name="Moldova",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(100, 299, 3),
            RangeRule(3000, 3999, 4),
            RangeRule(4000, 4499, 4),
            RangeRule(45, 89, 2),
            RangeRule(900, 949, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9976,
        name="Tanzania",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(5000, 5799, 4),
            RangeRule(580, 589, 3),
            RangeRule(59, 89, 2),
            RangeRule(900, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9977,
        name="Costa Rica",
        rules=(
            RangeRule(0, 89, 2),
            RangeRule(900, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9978,
        name="Ecuador",
        rules=(
            RangeRule(0, 29, 2),
            RangeRule(300, 399, 3),
            RangeRule(40, 94, 2),
            RangeRule(950, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9979,
        name="Iceland",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 64, 2),
            RangeRule(650, 659, 3),
            RangeRule(66, 75, 2),
            RangeRule(760, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9980,
        name="Papua New Guinea",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 89, 2),
            RangeRule(900, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9981,
        name="Morocco",
        rules=(
            RangeRule(0, 9, 2),
            RangeRule(100, 159, 3),
            RangeRule(1600, 1999, 4),
            RangeRule(20, 79, 2),
            RangeRule(800, 949, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9982,
        name="Zambia",
        rules=(
            RangeRule(0, 79, 2),
            RangeRule(800, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9983,
        name="Gambia",
        rules=(
            RangeRule(80, 94, 2),
            RangeRule(950, 989, 3),
            RangeRule(9900, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9984,
        name="Latvia",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9985,
        name="Estonia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 899, 3),
            RangeRule(9000, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9986,
        name="Lithuania",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 899, 3),
            RangeRule(9000, 9399, 4),
            RangeRule(940, 969, 3),
            RangeRule(97, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9987,
        name="Tanzania",
        rules=(
            RangeRule(0, 39, 2),
            RangeRule(400, 879, 3),
            RangeRule(8800, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9988,
        name="Ghana",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 54, 2),
            RangeRule(550, 749, 3),
            RangeRule(7500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=9989,
        name="North Macedonia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(100, 199, 3),
            RangeRule(2000, 2999, 4),
            RangeRule(30, 59, 2),
            RangeRule(600, 949, 3),
            RangeRule(9500, 9999, 4),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99901,
        name="Bahrain",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 799, 3),
            RangeRule(80, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99903,
        name="Mauritius",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99904,
        name="Curaao",
        rules=(
            RangeRule(0, 5, 1),
            RangeRule(60, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99905,
        name="Bolivia",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99906,
        name="Kuwait",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 699, 3),
            RangeRule(70, 89, 2),
            RangeRule(90, 94, 2),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99908,
        name="Malawi",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99909,
        name="Malta",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 94, 2),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99910,
        name="Sierra Leone",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99911,
        name="Lesotho",
        rules=(
            RangeRule(0, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99912,
        name="Botswana",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(400, 599, 3),
            RangeRule(60, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99913,
        name="Andorra",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 35, 2),
            RangeRule(600, 604, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99914,
        name="International NGO Publishers",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 69, 2),
            RangeRule(7, 7, 1),
            RangeRule(80, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99915,
        name="Maldives",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99916,
        name="Namibia",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 69, 2),
            RangeRule(700, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99917,
        name="Brunei Darussalam",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 88, 2),
            RangeRule(890, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99918,
        name="Faroe Islands",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99919,
        name="Benin",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(300, 399, 3),
            RangeRule(40, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99920,
        name="Andorra",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99921,
        name="Qatar",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 69, 2),
            RangeRule(700, 799, 3),
            RangeRule(8, 8, 1),
            RangeRule(90, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99922,
        name="Guatemala",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 69, 2),
            RangeRule(700, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99923,
        name="El Salvador",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99924,
        name="Nicaragua",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99925,
        name="Paraguay",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 19, 2),
            RangeRule(200, 299, 3),
            RangeRule(3, 3, 1),
            RangeRule(40, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99926,
        name="Honduras",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 59, 2),
            RangeRule(600, 869, 3),
            RangeRule(87, 89, 2),
            RangeRule(90, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99927,
        name="Albania",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99928,
        name="Georgia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99929,
        name="Mongolia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99930,
        name="Armenia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99931,
        name="Seychelles",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99932,
        name="Malta",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 59, 2),
            RangeRule(600, 699, 3),
            RangeRule(7, 7, 1),
            RangeRule(80, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99933,
        name="Nepal",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99934,
        name="Dominican Republic",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99935,
        name="Haiti",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 699, 3),
            RangeRule(7, 8, 1),
            RangeRule(90, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99936,
        name="Bhutan",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99937,
        name="Macau",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99938,
        name="Srpska, Republic of",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 59, 2),
            RangeRule(600, 899, 3),
            RangeRule(90, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99939,
        name="Guatemala",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(60, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99940,
        name="Georgia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 69, 2),
            RangeRule(700, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99941,
        name="Armenia",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99942,
        name="Sudan",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99943,
        name="Albania",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99944,
        name="Ethiopia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99945,
        name="Namibia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99946,
        name="Nepal",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99947,
        name="Tajikistan",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 69, 2),
            RangeRule(700, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99948,
        name="Eritrea",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99949,
        name="Mauritius",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99950,
        name="Cambodia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99952,
        name="Mali",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99953,
        name="Paraguay",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 79, 2),
            RangeRule(800, 939, 3),
            RangeRule(94, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99954,
        name="Bolivia",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 69, 2),
            RangeRule(700, 879, 3),
            RangeRule(88, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99955,
        name="Srpska, Republic of",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 59, 2),
            RangeRule(600, 799, 3),
            RangeRule(80, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99956,
        name="Albania",
        rules=(
            RangeRule(0, 59, 2),
            RangeRule(600, 859, 3),
            RangeRule(86, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99957,
        name="Malta",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 949, 3),
            RangeRule(95, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99958,
        name="Bahrain",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 93, 2),
            RangeRule(940, 949, 3),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99959,
        name="Luxembourg",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99960,
        name="Malawi",
        rules=(
            RangeRule(70, 99, 3),
            RangeRule(10, 94, 2),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99961,
        name="El Salvador",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(300, 369, 3),
            RangeRule(37, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99962,
        name="Mongolia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99963,
        name="Cambodia",
        rules=(
            RangeRule(0, 49, 2),
            RangeRule(500, 919, 3),
            RangeRule(92, 99, 2),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99964,
        name="Nicaragua",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99965,
        name="Macau",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(300, 359, 3),
            RangeRule(36, 62, 2),
            RangeRule(630, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99966,
        name="Kuwait",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(30, 69, 2),
            RangeRule(700, 799, 3),
            RangeRule(80, 96, 2),
            RangeRule(970, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99967,
        name="Paraguay",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 59, 2),
            RangeRule(600, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99968,
        name="Botswana",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(400, 599, 3),
            RangeRule(60, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99969,
        name="Oman",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99970,
        name="Haiti",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99971,
        name="Myanmar",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 84, 2),
            RangeRule(850, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99972,
        name="Faroe Islands",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 89, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99973,
        name="Mongolia",
        rules=(
            RangeRule(0, 3, 1),
            RangeRule(40, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99974,
        name="Bolivia",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(10, 25, 2),
            RangeRule(260, 399, 3),
            RangeRule(40, 63, 2),
            RangeRule(640, 649, 3),
            RangeRule(65, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99975,
        name="Tajikistan",
        rules=(
            RangeRule(0, 2, 1),
            RangeRule(300, 399, 3),
            RangeRule(40, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99976,
        name="Srpska, Republic of",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(20, 59, 2),
            RangeRule(600, 799, 3),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99977,
        name="Rwanda",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(40, 69, 2),
            RangeRule(700, 799, 3),
            RangeRule(995, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99978,
        name="Mongolia",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 69, 2),
            RangeRule(700, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99979,
        name="Honduras",
        rules=(
            RangeRule(0, 4, 1),
            RangeRule(50, 79, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99980,
        name="Bhutan",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(30, 59, 2),
            RangeRule(750, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99981,
        name="Macau",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(30, 74, 2),
            RangeRule(800, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99982,
        name="Benin",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(50, 65, 2),
            RangeRule(900, 979, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99983,
        name="El Salvador",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(50, 69, 2),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99985,
        name="Tajikistan",
        rules=(
            RangeRule(0, 1, 1),
            RangeRule(50, 79, 2),
            RangeRule(900, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99986,
        name="Myanmar",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(50, 69, 2),
            RangeRule(950, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99987,
        name="Luxembourg",
        rules=(
            RangeRule(850, 999, 3),
        ),
    ),
    RegistrationGroup(
        prefix=978,
        group=99988,
        name="Sudan",
        rules=(
            RangeRule(0, 0, 1),
            RangeRule(50, 54, 2),
            RangeRule(800, 824, 3),
        ),
    ),
    RegistrationGroup(
        prefix=979,
        group=10,
        name="France",
        rules=(
            RangeRule(0, 19, 2),
            RangeRule(200, 699, 3),
            RangeRule(7000, 8999, 4),
            RangeRule(90000, 97599, 5),
            RangeRule(976000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=979,
        group=11,
        name="Korea, Republic",
        rules=(
            RangeRule(0, 24, 2),
            RangeRule(250, 549, 3),
            RangeRule(5500, 8499, 4),
            RangeRule(85000, 94999, 5),
            RangeRule(950000, 999999, 6),
        ),
    ),
    RegistrationGroup(
        prefix=979,
        group=12,
        name="Italy",
        rules=(
            RangeRule(200, 299, 3),
            RangeRule(5450, 5999, 4),
            RangeRule(80000, 84999, 5),
        ),
    ),
    RegistrationGroup(
        prefix=979,
        group=8,
        name="United States",
        rules=(
            RangeRule(200, 219, 3),
            RangeRule(4500, 7999, 4),
            RangeRule(88500, 89999, 5),
            RangeRule(9850000, 9869999, 7),
        ),
    ),
)
