"""Sunglasses outlines for the pepe variant.

Each outline is a fixed path in its own viewBox; the generator scales it to
the eye span and centres it between the eyes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Glasses:
    name: str
    width: float
    height: float
    path: str
    # Lens ellipses (cx, cy, rx, ry) that are tinted instead of solid
    lenses: tuple[tuple[float, float, float, float], ...] = ()


SHUTTER_SHADES = Glasses(
    name="shutter",
    width=703,
    height=282,
    path=(
        "M236.073 1.37938C129.2 3.46326 111.636 4.95175 89.3088 15.3711C55.9669 30.85"
        "13 34.8304 58.537 23.8157 101.108L22.3272 107.062H14.5871C8.33549 107.062 6."
        "25162 107.657 3.27466 110.634C1.06464e-06 114.206 0 114.504 0 140.999C0 173."
        "448 0.297697 174.043 14.2894 175.234L22.9226 175.829L26.7927 187.142C42.2729"
        " 232.987 78.2941 266.031 126.223 278.535C141.406 282.405 172.664 283 191.121"
        " 279.13C220.593 273.176 260.782 256.803 284.895 240.429C319.428 217.209 341."
        "755 189.523 348.9 160.647L351.579 150.227L353.365 159.158C356.64 176.722 372"
        ".12 202.027 389.982 218.4C419.752 246.086 464.108 268.413 508.167 277.939C52"
        "8.708 282.405 558.776 282.405 576.042 277.939C601.346 271.688 623.673 259.18"
        "4 641.833 241.322C657.908 225.545 672.793 200.538 677.556 181.188L679.343 17"
        "4.639H687.678C693.632 174.639 696.609 174.043 698.991 171.959C702.265 169.28"
        " 702.265 168.685 702.861 143.083C703.456 108.848 702.861 107.359 686.19 106."
        "466L680.236 106.168L676.961 94.2606C666.542 58.2394 645.405 31.4467 615.04 1"
        "6.5619C591.225 4.95173 577.233 3.16556 478.993 1.08169C409.034 -0.406789 329"
        ".55 -0.406794 236.073 1.37938ZM240.241 37.996C260.782 42.1638 279.834 47.522"
        "3 294.421 53.1785C301.268 55.8578 306.925 58.5371 306.925 58.8347C306.925 59"
        ".1324 256.316 59.4301 194.991 59.4301H82.7595L87.8204 55.2624C99.7282 45.140"
        "7 122.055 37.6983 147.062 35.6144C155.397 35.019 176.236 34.7214 193.8 35.01"
        "91C218.807 34.7214 228.631 35.3168 240.241 37.996ZM545.677 35.0191C578.126 3"
        "6.8052 599.262 43.0568 613.552 54.667L618.613 58.8347H506.679C445.056 58.834"
        "7 394.447 58.537 394.447 58.2393C394.447 56.7509 420.347 46.9269 433.743 43."
        "3545C453.391 37.6983 462.917 36.2098 481.97 35.0191C505.488 33.8283 519.48 3"
        "3.8283 545.677 35.0191ZM318.237 99.0237C318.535 104.978 318.535 104.68 317.3"
        "44 115.992L316.451 125.519H185.167H53.5853V121.649C53.5853 117.183 57.4554 1"
        "00.512 59.5392 96.6422C60.73 94.2606 68.1724 94.2606 189.335 94.2606H317.939"
        "L318.237 99.0237ZM643.619 103.489C644.81 107.955 646.298 114.802 646.894 118"
        ".672L647.787 125.816H516.205H384.623L383.135 114.504C382.242 108.252 381.944"
        " 101.108 382.242 99.0237L383.135 94.856L512.037 95.1537L640.94 95.4514L643.6"
        "19 103.489ZM305.139 168.982C303.65 172.852 299.482 179.699 296.505 184.76L29"
        "0.551 193.393L176.832 193.096L63.1116 192.798L59.2415 182.974C57.1577 177.31"
        "8 55.0738 170.769 54.4784 167.792L53.5853 162.433H180.702H307.818L305.139 16"
        "8.982ZM647.489 163.624C647.489 166.005 643.024 180.295 640.047 186.844L637.3"
        "67 193.691H523.945H410.523L406.355 187.737C401.89 181.783 397.127 172.555 39"
        "4.745 166.303L393.257 162.731H520.373C590.331 162.433 647.489 163.028 647.48"
        "9 163.624ZM233.989 234.475C193.502 254.123 152.123 257.993 120.269 244.895C1"
        "12.231 241.62 93.4766 230.903 93.4766 229.415C93.4766 229.117 127.712 228.81"
        "9 169.687 229.117H245.599L233.989 234.475ZM605.216 231.796C599.262 236.559 5"
        "80.805 245.49 570.683 248.765C542.998 257.398 503.404 252.04 467.383 234.773"
        "L456.07 229.415H532.281C608.491 228.819 608.789 229.117 605.216 231.796Z"
    ),
)

NERD_GLASSES = Glasses(
    name="nerd",
    width=703,
    height=221,
    path=(
        "M166.195 0.0337373C192.983 0.359001 219.782 0.140273 246.536 2.1199C266.824 "
        "3.62284 286.988 6.34272 307.186 8.56909C338.732 12.0404 370.195 12.1582 401."
        "747 7.81764C429.277 4.02663 456.953 0.863703 484.797 0.611343C529.299 0.2019"
        "59 573.819 -0.745773 618.276 2.24329C642.064 3.84718 665.818 6.02307 689.353"
        " 10.0496C700.191 11.9059 701.23 13.1957 702.107 24.0696C702.107 24.2154 702."
        "107 24.3668 702.107 24.507C704.562 35.4202 701.916 44.0846 693.022 51.8068C6"
        "83.527 60.0561 681.853 72.1862 681.004 84.1817C679.617 103.888 676.167 123.2"
        "02 669.712 141.944C665.361 154.801 659.456 167.079 652.126 178.508C638.171 2"
        "00.037 618.304 212.762 593.134 216.357C555.16 221.785 516.905 222.997 478.92"
        "6 217.192C434.339 210.35 405.472 184.492 391.955 141.512C384.904 119.08 380."
        "853 95.9585 376.268 72.9657C376.072 71.9675 375.802 70.9861 375.583 69.9879C"
        "373.942 62.4676 371.482 55.3342 363.065 53.0125C353.368 50.3319 343.66 49.95"
        "61 334.693 55.6595C330.406 58.3906 328.917 62.9499 327.951 67.5316C324.58 83"
        ".1947 321.675 98.9364 318.153 114.583C313.849 133.65 308.602 152.532 298.399"
        " 169.491C282.437 196.056 258.211 210.665 228.17 216.598C213.164 219.548 197."
        "966 220.293 182.741 220.394C160.93 220.535 139.148 220.069 117.411 217.736C8"
        "0.9428 213.811 56.3684 194.373 41.2102 161.707C30.3276 138.265 24.4565 113.6"
        "52 22.153 88.0513C21.6586 82.5386 21.0743 77.0147 20.1304 71.5638C18.4449 61"
        ".8227 13.1862 53.9154 5.94421 47.4942C1.37654 43.4453 -0.612335 39.0037 0.16"
        "8607 33.0144C0.730436 28.8308 0.634926 24.5743 1.09563 20.3739C1.76982 14.32"
        "29 3.65757 12.1863 9.63543 10.9357C26.8499 7.33535 44.3565 5.88846 61.8181 4"
        ".11073C96.5223 0.60573 131.339 -0.179367 166.195 0.0337373ZM532.614 23.2677C"
        "510.652 22.8807 488.724 22.791 466.976 26.6325C451.778 29.3243 436.873 32.80"
        "13 423.569 41.0114C411.057 48.7785 403.427 59.4337 403.787 74.7267C404.157 9"
        "1.3656 405.579 107.904 408.843 124.24C416.31 161.813 441.39 187.61 478.959 1"
        "94.598C514.355 201.209 550.065 200.15 585.51 194.396C614.164 189.752 633.137"
        " 172.654 643.654 146.167C652.772 123.174 654.02 99.0598 652.61 74.7435C651.8"
        "06 60.8805 645.677 49.6813 633.569 42.0432C624.423 36.2782 614.349 32.9639 6"
        "04.051 30.0589C580.611 23.4527 556.604 23.4808 532.614 23.2677ZM187.157 23.4"
        "471C158.548 22.8527 134.412 22.1236 110.607 27.5466C96.174 30.8329 81.8024 3"
        "4.1976 69.077 42.1834C59.8573 47.9821 53.6828 55.9118 51.8457 66.8586C47.306"
        "1 93.8836 49.5983 120.415 59.2674 145.965C69.3803 172.614 88.4151 189.747 11"
        "7.17 194.356C152.924 200.088 188.904 201.338 224.586 194.497C259.7 187.767 2"
        "82.201 166.193 292.005 132.024C297.298 113.573 298.314 94.45 299.017 75.3548"
        "C299.522 61.7385 293.803 51.4535 283.05 43.6023C271.965 35.5043 259.155 31.5"
        "843 246.003 28.4046C225.125 23.3686 203.809 24.6921 187.157 23.4471Z"
    ),
)

AVIATORS = Glasses(
    name="aviator",
    width=703,
    height=257,
    path=(
        "M555.005 2.35602C576.77 2.24799 598.497 4.1972 619.895 8.17763C679.58 19.553"
        "7 702.096 45.9427 702.979 107.412C703.274 128.582 700.979 149.718 694.547 17"
        "0.196C678.47 221.365 634.623 254.74 580.775 256.493C487.758 259.514 399.933 "
        "184.928 387.658 92.5909C387.028 87.8583 385.994 83.1805 385.432 78.4342C383."
        "137 59.0242 371.191 48.2029 351.757 48.0796C332.323 47.9563 318.822 58.8119 "
        "317.637 77.8725C312.294 163.841 237.868 237.891 170.292 252.678C89.0233 270."
        "486 10.9807 233.789 1.55504 135.246C0.130234 120.384 -0.801371 105.679 1.000"
        "19 90.776C6.93233 41.7649 28.9347 17.821 77.2823 8.78034C122.445 0.335585 16"
        "8.313 2.28755 213.879 0.787627C260.59 -0.753386 307.389 0.44518 354.154 0.44"
        "518C354.148 1.08213 488.052 2.34917 555.005 2.35602ZM262.158 10.3282C262.405"
        " 14.828 265.583 14.3554 267.878 15.2458C285.25 21.944 302.854 28.3272 311.60"
        "9 46.9564C315.335 54.9012 319.055 49.2097 322.637 46.7646C334.098 38.9431 34"
        "6.613 36.1625 360.347 38.3336C370.622 39.9499 379.301 50.5726 387.062 49.538"
        "4C394.597 48.5385 397.241 33.4366 406.763 28.7313C418.25 23.0467 429.772 17."
        "4443 444.301 10.3282H262.158Z"
    ),
    lenses=((175, 128, 85, 75), (528, 128, 85, 75)),
)

GLASSES = (SHUTTER_SHADES, NERD_GLASSES, AVIATORS)
